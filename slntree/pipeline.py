"""Solution enrichment entry points and the timed phase orchestrator."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Iterable
from pathlib import Path

from slntree.config import ParseConfig, ParseResult, ProjectType, Solution
from slntree.dotnet.project_types import map_project_type
from slntree.dotnet.solution import read_solution_lines
from slntree.errors import SolutionArgumentError
from slntree.graph.nesting_graph import NestingGraph
from slntree.output import build_result
from slntree.phases.hierarchy import build_hierarchy
from slntree.phases.nesting import extract_nested_mappings
from slntree.phases.projects import extract_projects

logger = logging.getLogger(__name__)

Classifier = Callable[[uuid.UUID], ProjectType]

_PHASE_LABELS = {
    "reading": "Reading solution file",
    "enrichment": "Rebuilding project hierarchy",
    "diagnostics": "Analysing nesting relation",
}


def enrich_solution(
    solution: Solution,
    lines: Iterable[str],
    classify: Classifier = map_project_type,
) -> None:
    """Populate ``solution.all_projects`` and ``solution.projects`` from lines.

    Both views are assigned only once every pass has succeeded, so a failure
    leaves the solution untouched.
    """
    if solution is None:
        raise SolutionArgumentError("solution must not be None")
    if lines is None:
        raise SolutionArgumentError("lines must not be None")

    lines = list(lines)
    flat_projects = extract_projects(lines, solution.file, classify)
    mappings = extract_nested_mappings(lines)
    top_level = build_hierarchy(flat_projects, mappings)

    solution.all_projects = tuple(flat_projects)
    solution.projects = tuple(top_level)


def build_solution(
    sln_path: str | Path,
    lines: Iterable[str],
    classify: Classifier = map_project_type,
) -> Solution:
    """Build a Solution for ``sln_path`` from already-read lines."""
    solution = Solution(file=Path(sln_path))
    enrich_solution(solution, lines, classify)
    return solution


def parse_solution(sln_path: str | Path, classify: Classifier = map_project_type) -> Solution:
    """Read a .sln file from disk and build its project hierarchy."""
    return build_solution(sln_path, read_solution_lines(str(sln_path)), classify)


def run_pipeline(
    config: ParseConfig,
    progress_callback=None,
) -> tuple[Solution, ParseResult]:
    """Execute the read / enrich / diagnose phases and return the result.

    Args:
        config: Parse configuration.
        progress_callback: Optional callable(phase_name, label) invoked
            when each phase starts. Used by the CLI for Rich progress.
    """
    solution = Solution(file=Path(config.solution_path))
    lines: list[str] = []
    cycles: list[list[uuid.UUID]] = []
    graphs: list[NestingGraph] = []
    timings: dict[str, float] = {}
    total_start = time.monotonic()

    def _read() -> None:
        lines.extend(read_solution_lines(config.solution_path))

    def _diagnose() -> None:
        graph = NestingGraph.from_mappings(extract_nested_mappings(lines))
        graphs.append(graph)
        if not config.check_cycles:
            return
        for cycle in graph.find_cycles():
            logger.warning(f"Nesting cycle detected: {' -> '.join(str(c) for c in cycle)}")
            cycles.append(cycle)

    phases = [
        ("reading", _read),
        ("enrichment", lambda: enrich_solution(solution, lines)),
        ("diagnostics", _diagnose),
    ]

    for name, phase_fn in phases:
        if progress_callback:
            progress_callback(name, _PHASE_LABELS.get(name, name))
        start = time.monotonic()
        phase_fn()
        timings[name] = time.monotonic() - start

    total_ms = (time.monotonic() - total_start) * 1000

    return solution, build_result(config, solution, timings, total_ms, graphs[0], cycles)
