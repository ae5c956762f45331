"""Tests for Phase 2: Nesting relation extraction."""

from __future__ import annotations

import os
import uuid

import pytest

from slntree.dotnet.solution import read_solution_lines
from slntree.errors import InvalidProjectIdError
from slntree.phases.nesting import extract_nested_mappings

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

CHILD = uuid.UUID("AAAAAAAA-0000-0000-0000-000000000001")
PARENT = uuid.UUID("11111111-1111-1111-1111-111111111111")


def _section(*body: str) -> list[str]:
    return [
        "Global",
        "\tGlobalSection(NestedProjects) = preSolution",
        *body,
        "\tEndGlobalSection",
        "EndGlobal",
    ]


class TestExtractNestedMappings:
    def test_no_section(self):
        assert extract_nested_mappings(["Global", "EndGlobal"]) == []

    def test_empty_input(self):
        assert extract_nested_mappings([]) == []

    def test_single_mapping(self):
        mappings = extract_nested_mappings(_section(f"\t\t{{{CHILD}}} = {{{PARENT}}}"))

        assert len(mappings) == 1
        assert mappings[0].child_id == CHILD
        assert mappings[0].parent_id == PARENT

    def test_unindented_section(self):
        lines = [
            "GlobalSection(NestedProjects) = preSolution",
            f"{{{CHILD}}} = {{{PARENT}}}",
            "EndGlobalSection",
        ]
        assert len(extract_nested_mappings(lines)) == 1

    def test_blank_and_garbage_lines_skipped(self):
        mappings = extract_nested_mappings(_section(
            "",
            "   ",
            "\t\tnot a mapping",
            f"\t\t{{{CHILD}}} = {{{PARENT}}}",
        ))
        assert len(mappings) == 1

    def test_mappings_outside_section_ignored(self):
        other = uuid.uuid4()
        lines = [
            "\tGlobalSection(ProjectConfigurationPlatforms) = postSolution",
            f"\t\t{{{other}}} = {{{PARENT}}}",
            "\tEndGlobalSection",
            *_section(f"\t\t{{{CHILD}}} = {{{PARENT}}}"),
            f"{{{other}}} = {{{CHILD}}}",
        ]
        mappings = extract_nested_mappings(lines)
        assert [m.child_id for m in mappings] == [CHILD]

    def test_stops_at_first_end_marker(self):
        late = uuid.uuid4()
        lines = _section(f"\t\t{{{CHILD}}} = {{{PARENT}}}") + [
            f"\t\t{{{late}}} = {{{PARENT}}}",
            "\tEndGlobalSection",
        ]
        assert [m.child_id for m in extract_nested_mappings(lines)] == [CHILD]

    def test_unterminated_section_runs_to_end(self):
        lines = [
            "\tGlobalSection(NestedProjects) = preSolution",
            f"\t\t{{{CHILD}}} = {{{PARENT}}}",
        ]
        assert len(extract_nested_mappings(lines)) == 1

    def test_duplicates_kept_in_order(self):
        other = uuid.uuid4()
        mappings = extract_nested_mappings(_section(
            f"\t\t{{{CHILD}}} = {{{PARENT}}}",
            f"\t\t{{{CHILD}}} = {{{other}}}",
        ))
        assert [m.parent_id for m in mappings] == [PARENT, other]

    def test_invalid_guid_fails_loudly(self):
        with pytest.raises(InvalidProjectIdError):
            extract_nested_mappings(_section(f"\t\t{{ZZZZ}} = {{{PARENT}}}"))

    def test_fixture_solution(self):
        lines = read_solution_lines(os.path.join(FIXTURES_DIR, "grouped", "Grouped.sln"))
        mappings = extract_nested_mappings(lines)

        assert len(mappings) == 4
        children = {str(m.child_id).upper() for m in mappings}
        assert "AAAAAAAA-0000-0000-0000-000000000003" in children
        assert "CCCCCCCC-0000-0000-0000-000000000000" not in children
