"""JSON serialisation of a parsed solution."""

from __future__ import annotations

import json
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path

from slntree.config import (
    ParseConfig,
    ParseResult,
    ProjectNode,
    Solution,
    SolutionFolder,
)
from slntree.graph.nesting_graph import NestingGraph


def format_guid(value: uuid.UUID) -> str:
    """Render a GUID the way Visual Studio writes it: upper-case, hyphenated."""
    return str(value).upper()


def _project_entry(project: ProjectNode) -> dict:
    entry = {
        "id": format_guid(project.id),
        "name": project.name,
        "type_id": format_guid(project.type_id),
        "type": project.project_type.value,
    }
    if isinstance(project, SolutionFolder):
        entry["children"] = [_project_entry(child) for child in project.projects]
    else:
        entry["file"] = str(project.file)
    return entry


def _parent_index(solution: Solution) -> dict[int, str]:
    """Map id() of every nested project to its folder's GUID."""
    parents: dict[int, str] = {}
    for project in solution.all_projects:
        if isinstance(project, SolutionFolder):
            for child in project.projects:
                parents[id(child)] = format_guid(project.id)
    return parents


def _count_types(solution: Solution) -> dict[str, int]:
    """Count projects per project type."""
    counts: dict[str, int] = {}
    for project in solution.all_projects:
        key = project.project_type.value
        counts[key] = counts.get(key, 0) + 1
    return counts


def build_result(
    config: ParseConfig,
    solution: Solution,
    timings: dict[str, float],
    total_ms: float,
    graph: NestingGraph | None = None,
    cycles: list[list[uuid.UUID]] | None = None,
) -> ParseResult:
    """Build the ParseResult from an enriched solution."""
    sln_path = Path(os.path.abspath(config.solution_path or solution.file))
    parents = _parent_index(solution)
    folders = [p for p in solution.all_projects if isinstance(p, SolutionFolder)]

    return ParseResult(
        version="1.0",
        metadata={
            "solution_name": solution.name,
            "solution_path": str(sln_path),
            "parsed_at": datetime.now(timezone.utc).isoformat(),
            "slntree_version": "0.1.0",
            "parse_duration_ms": round(total_ms, 1),
            "phase_timings": timings,
        },
        stats={
            "projects": len(solution.all_projects) - len(folders),
            "folders": len(folders),
            "top_level": len(solution.projects),
            "nesting_edges": graph.edge_count() if graph else 0,
            "cycles": len(cycles or []),
            "types": _count_types(solution),
        },
        projects=[_project_entry(p) for p in solution.projects],
        all_projects=[
            {
                "id": format_guid(p.id),
                "name": p.name,
                "type": p.project_type.value,
                "parent": parents.get(id(p)),
                "depth": graph.depth(p.id) if graph else 0,
                "file": None if isinstance(p, SolutionFolder) else str(p.file),
            }
            for p in solution.all_projects
        ],
        cycles=[[format_guid(c) for c in cycle] for cycle in (cycles or [])],
    )


def write_output(result: ParseResult, output_path: str) -> None:
    """Write the parse result to a JSON file."""
    from dataclasses import asdict

    data = asdict(result)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)
