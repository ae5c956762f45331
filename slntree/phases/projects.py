"""Phase 1: Flat project extraction from declaration lines."""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Callable, Iterable
from pathlib import Path

from slntree.config import (
    ProjectDeclaration,
    ProjectNode,
    ProjectType,
    SolutionFolder,
    SolutionProject,
)
from slntree.dotnet.project_types import map_project_type
from slntree.dotnet.solution import match_project_declaration
from slntree.errors import IndeterminateDirectoryError, InvalidProjectIdError

logger = logging.getLogger(__name__)


def parse_guid(value: str) -> uuid.UUID:
    """Parse a GUID captured from a solution line."""
    try:
        return uuid.UUID(value)
    except ValueError as e:
        raise InvalidProjectIdError(value) from e


def solution_directory(sln_path: str | Path) -> Path:
    """Return the absolute directory containing the solution file.

    The path is made absolute without touching the filesystem; symlinks
    are not followed.
    """
    # Path("") and Path(".") both collapse to "." which names no file
    if Path(sln_path).name == "":
        raise IndeterminateDirectoryError(str(sln_path))

    path = Path(os.path.abspath(sln_path))
    if path.parent == path:
        raise IndeterminateDirectoryError(str(sln_path))
    return path.parent


def _resolve_project_file(directory: Path, relative_path: str) -> Path:
    # Normalise path separators
    relative_path = relative_path.replace("\\", "/")
    return Path(os.path.normpath(directory / relative_path))


def _build_node(
    decl: ProjectDeclaration,
    directory: Path,
    classify: Callable[[uuid.UUID], ProjectType],
) -> ProjectNode:
    type_id = parse_guid(decl.type_guid)
    project_id = parse_guid(decl.project_guid)
    project_type = classify(type_id)

    if project_type == ProjectType.SOLUTION_FOLDER:
        return SolutionFolder(id=project_id, name=decl.name, type_id=type_id)

    return SolutionProject(
        id=project_id,
        name=decl.name,
        type_id=type_id,
        project_type=project_type,
        file=_resolve_project_file(directory, decl.path),
    )


def extract_projects(
    lines: Iterable[str],
    sln_path: str | Path,
    classify: Callable[[uuid.UUID], ProjectType] = map_project_type,
) -> list[ProjectNode]:
    """Build one node per Project(...) line, in file order.

    Lines that do not match the declaration pattern are skipped.
    """
    directory = solution_directory(sln_path)

    projects: list[ProjectNode] = []
    for line in lines:
        decl = match_project_declaration(line)
        if decl is None:
            continue

        node = _build_node(decl, directory, classify)
        logger.debug(f"Solution project: {node.name} ({node.project_type.value}) -> {node.id}")
        projects.append(node)

    return projects
