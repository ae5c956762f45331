"""Match the .sln line shapes needed to rebuild the project hierarchy."""

from __future__ import annotations

import re

from slntree.config import ProjectDeclaration

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
_PROJECT_PREFIX = 'Project("{'
_PROJECT_RE = re.compile(
    r'Project\(\"\{([A-Za-z0-9\-]+)\}\"\) = \"(.+)\", \"(.+)\", \"\{([A-Za-z0-9\-]+)\}'
)

# {CHILD-GUID} = {PARENT-GUID}
_NESTED_RE = re.compile(r"\{([A-Za-z0-9\-]+)\} = \{([A-Za-z0-9\-]+)\}")

NESTED_SECTION_START = "GlobalSection(NestedProjects"
SECTION_END = "EndGlobalSection"


def match_project_declaration(line: str) -> ProjectDeclaration | None:
    """Return the captured fields of a Project(...) line, or None."""
    if not line.startswith(_PROJECT_PREFIX):
        return None

    match = _PROJECT_RE.match(line)
    if not match:
        return None

    return ProjectDeclaration(
        type_guid=match.group(1),
        name=match.group(2),
        path=match.group(3),
        project_guid=match.group(4),
    )


def match_nested_mapping(line: str) -> tuple[str, str] | None:
    """Return (child_guid, parent_guid) for a NestedProjects entry, or None."""
    match = _NESTED_RE.search(line)
    if not match:
        return None
    return match.group(1), match.group(2)


def read_solution_lines(sln_path: str) -> list[str]:
    """Read a .sln file into a list of lines.

    Visual Studio writes solutions with a UTF-8 BOM, which is dropped here.
    """
    with open(sln_path, "r", encoding="utf-8-sig") as f:
        return f.read().splitlines()
