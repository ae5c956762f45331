"""Exceptions raised while reconstructing a solution."""

from __future__ import annotations


class SlnTreeError(Exception):
    """Base class for all slntree errors."""


class SolutionArgumentError(SlnTreeError, ValueError):
    """A required argument to the enrichment entry point was missing."""


class SolutionStructureError(SlnTreeError):
    """The solution file describes an inconsistent project structure."""


class IndeterminateDirectoryError(SolutionStructureError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Solution directory could not be determined for '{path}'")


class InvalidProjectIdError(SolutionStructureError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"'{value}' is not a valid project GUID")


class DanglingParentError(SolutionStructureError):
    def __init__(self, parent_id, child_id) -> None:
        self.parent_id = parent_id
        self.child_id = child_id
        super().__init__(
            f"Expected to find a project with id '{parent_id}' "
            f"(parent of '{child_id}'), but found none"
        )


class SelfNestingError(SolutionStructureError):
    def __init__(self, project_id) -> None:
        self.project_id = project_id
        super().__init__(f"Project with id '{project_id}' is nested under itself")


class ParentNotFolderError(SolutionStructureError):
    def __init__(self, parent_id, actual_type: str) -> None:
        self.parent_id = parent_id
        self.actual_type = actual_type
        super().__init__(
            f"Expected project with id '{parent_id}' to be a solution folder "
            f"but found '{actual_type}'"
        )
