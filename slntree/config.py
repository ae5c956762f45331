"""Core data types and configuration for solution parsing."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union


class ProjectType(str, Enum):
    SOLUTION_FOLDER = "SolutionFolder"
    CSHARP = "CSharp"
    CSHARP_SDK = "CSharpSdk"
    VBNET = "VbNet"
    VBNET_SDK = "VbNetSdk"
    FSHARP = "FSharp"
    FSHARP_SDK = "FSharpSdk"
    CPP = "Cpp"
    TEST = "Test"
    WEB_SITE = "WebSite"
    WEB_APPLICATION = "WebApplication"
    DATABASE = "Database"
    WIX = "Wix"
    SHARED = "Shared"
    PYTHON = "Python"
    NODEJS = "NodeJs"
    DOCKER_COMPOSE = "DockerCompose"
    UNKNOWN = "Unknown"


@dataclass
class ProjectDeclaration:
    """Raw fields captured from a Project(...) line."""
    type_guid: str
    name: str
    path: str
    project_guid: str


@dataclass
class NestedProjectMapping:
    """A child -> parent pointer from the NestedProjects section."""
    child_id: uuid.UUID
    parent_id: uuid.UUID


@dataclass(eq=False)
class SolutionFolder:
    """A virtual grouping folder. Owns its children exclusively."""
    id: uuid.UUID
    name: str
    type_id: uuid.UUID
    project_type: ProjectType = ProjectType.SOLUTION_FOLDER
    _projects: list[ProjectNode] = field(default_factory=list, repr=False)

    @property
    def projects(self) -> tuple[ProjectNode, ...]:
        return tuple(self._projects)

    def add_project(self, project: ProjectNode) -> None:
        self._projects.append(project)


@dataclass(eq=False)
class SolutionProject:
    """A buildable project bound to its descriptor file on disk."""
    id: uuid.UUID
    name: str
    type_id: uuid.UUID
    project_type: ProjectType
    file: Path


ProjectNode = Union[SolutionFolder, SolutionProject]


@dataclass
class Solution:
    file: Path
    all_projects: tuple[ProjectNode, ...] = ()
    projects: tuple[ProjectNode, ...] = ()

    @property
    def name(self) -> str:
        return Path(self.file).stem

    def find_project(self, project_id: uuid.UUID) -> ProjectNode | None:
        """Return the first project declared with the given id."""
        return next((p for p in self.all_projects if p.id == project_id), None)


@dataclass
class ParseConfig:
    solution_path: str = ""
    output_path: str | None = None
    check_cycles: bool = False
    verbose: bool = False
    quiet: bool = False


@dataclass
class ParseResult:
    version: str = "1.0"
    metadata: dict[str, Any] = field(default_factory=dict)
    stats: dict[str, Any] = field(default_factory=dict)
    projects: list[dict] = field(default_factory=list)
    all_projects: list[dict] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)
