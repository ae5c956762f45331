"""Tests for Phase 3: Hierarchy reconstruction."""

from __future__ import annotations

import uuid
from pathlib import Path

import pytest

from slntree.config import (
    NestedProjectMapping,
    ProjectType,
    SolutionFolder,
    SolutionProject,
)
from slntree.errors import (
    DanglingParentError,
    ParentNotFolderError,
    SelfNestingError,
    SolutionStructureError,
)
from slntree.phases.hierarchy import build_hierarchy

FOLDER_TYPE = uuid.UUID("2150E333-8FDC-42A3-9474-1A3956D46DE8")
CSHARP_TYPE = uuid.UUID("FAE04EC0-301F-11D3-BF4B-00C04F79EFBC")


def _folder(name: str) -> SolutionFolder:
    return SolutionFolder(id=uuid.uuid4(), name=name, type_id=FOLDER_TYPE)


def _project(name: str) -> SolutionProject:
    return SolutionProject(
        id=uuid.uuid4(),
        name=name,
        type_id=CSHARP_TYPE,
        project_type=ProjectType.CSHARP,
        file=Path(f"/repo/{name}/{name}.csproj"),
    )


def _nest(child, parent) -> NestedProjectMapping:
    return NestedProjectMapping(child_id=child.id, parent_id=parent.id)


class TestBuildHierarchy:
    def test_empty(self):
        assert build_hierarchy([], []) == []

    def test_no_mappings_keeps_everything_top_level(self):
        flat = [_project("A"), _folder("F"), _project("B")]
        assert build_hierarchy(flat, []) == flat

    def test_child_attached_to_folder(self):
        folder = _folder("F")
        project = _project("P")

        top = build_hierarchy([folder, project], [_nest(project, folder)])

        assert top == [folder]
        assert folder.projects == (project,)

    def test_child_declared_before_folder(self):
        project = _project("P")
        folder = _folder("F")

        top = build_hierarchy([project, folder], [_nest(project, folder)])

        assert top == [folder]
        assert folder.projects == (project,)

    def test_children_in_declaration_order(self):
        folder = _folder("F")
        a, b, c = _project("A"), _project("B"), _project("C")
        mappings = [_nest(c, folder), _nest(a, folder), _nest(b, folder)]

        build_hierarchy([folder, a, b, c], mappings)

        assert [p.name for p in folder.projects] == ["A", "B", "C"]

    def test_nested_folders(self):
        outer, inner = _folder("outer"), _folder("inner")
        leaf, loose = _project("leaf"), _project("loose")
        mappings = [_nest(inner, outer), _nest(leaf, inner)]

        top = build_hierarchy([outer, inner, leaf, loose], mappings)

        assert top == [outer, loose]
        assert outer.projects == (inner,)
        assert inner.projects == (leaf,)

    def test_every_node_placed_once(self):
        f1, f2 = _folder("f1"), _folder("f2")
        projects = [_project(str(i)) for i in range(5)]
        flat = [f1, *projects, f2]
        mappings = [_nest(projects[0], f1), _nest(projects[3], f2), _nest(f2, f1)]

        top = build_hierarchy(flat, mappings)

        placed = list(top)
        for folder in (f1, f2):
            placed.extend(folder.projects)
        assert sorted(id(p) for p in placed) == sorted(id(p) for p in flat)

    def test_first_duplicate_mapping_wins(self):
        first, second = _folder("first"), _folder("second")
        project = _project("P")
        mappings = [_nest(project, first), _nest(project, second)]

        build_hierarchy([first, second, project], mappings)

        assert first.projects == (project,)
        assert second.projects == ()

    def test_mapping_for_unknown_child_is_ignored(self):
        folder = _folder("F")
        ghost = _project("ghost")

        top = build_hierarchy([folder], [_nest(ghost, folder)])

        assert top == [folder]
        assert folder.projects == ()

    def test_dangling_parent(self):
        project = _project("P")
        missing = _folder("missing")

        with pytest.raises(DanglingParentError) as exc_info:
            build_hierarchy([project], [_nest(project, missing)])

        assert exc_info.value.parent_id == missing.id
        assert str(missing.id) in str(exc_info.value)

    def test_parent_not_folder(self):
        parent, child = _project("parent"), _project("child")

        with pytest.raises(ParentNotFolderError) as exc_info:
            build_hierarchy([parent, child], [_nest(child, parent)])

        assert exc_info.value.parent_id == parent.id
        assert exc_info.value.actual_type == "CSharp"

    def test_folder_nested_under_itself(self):
        folder = _folder("F")
        with pytest.raises(SelfNestingError):
            build_hierarchy([folder], [_nest(folder, folder)])

    def test_structure_errors_share_base(self):
        project = _project("P")
        with pytest.raises(SolutionStructureError):
            build_hierarchy([project], [_nest(project, _folder("missing"))])

    def test_cycle_is_tolerated(self):
        a, b = _folder("a"), _folder("b")

        top = build_hierarchy([a, b], [_nest(a, b), _nest(b, a)])

        assert top == []
        assert a.projects == (b,)
        assert b.projects == (a,)
