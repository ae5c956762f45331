"""Phase 3: Reassemble the project tree from the flat list and nesting relation."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence

from slntree.config import NestedProjectMapping, ProjectNode, SolutionFolder
from slntree.errors import DanglingParentError, ParentNotFolderError, SelfNestingError

logger = logging.getLogger(__name__)


def _find_mapping(
    project_id: uuid.UUID, mappings: Sequence[NestedProjectMapping]
) -> NestedProjectMapping | None:
    """First mapping for the child wins; later duplicates are ignored."""
    return next((m for m in mappings if m.child_id == project_id), None)


def _find_project(
    project_id: uuid.UUID, projects: Sequence[ProjectNode]
) -> ProjectNode | None:
    return next((p for p in projects if p.id == project_id), None)


def build_hierarchy(
    flat_projects: Sequence[ProjectNode],
    mappings: Sequence[NestedProjectMapping],
) -> list[ProjectNode]:
    """Attach every project to its parent folder or to the top level.

    Folders receive their children in place, in declaration order. Returns
    the top-level projects, also in declaration order.

    Raises:
        SelfNestingError: a project is mapped onto itself.
        DanglingParentError: a mapping names a parent that was never declared.
        ParentNotFolderError: a mapping names a parent that is not a folder.
    """
    top_level: list[ProjectNode] = []

    for project in flat_projects:
        mapping = _find_mapping(project.id, mappings)
        if mapping is None:
            top_level.append(project)
            continue

        if mapping.parent_id == project.id:
            raise SelfNestingError(project.id)

        parent = _find_project(mapping.parent_id, flat_projects)
        if parent is None:
            raise DanglingParentError(mapping.parent_id, project.id)

        if not isinstance(parent, SolutionFolder):
            raise ParentNotFolderError(parent.id, parent.project_type.value)

        parent.add_project(project)
        logger.debug(f"Nested {project.name} under {parent.name}")

    return top_level
