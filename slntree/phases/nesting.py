"""Phase 2: Nesting relation extraction from the NestedProjects section."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from slntree.config import NestedProjectMapping
from slntree.dotnet.solution import (
    NESTED_SECTION_START,
    SECTION_END,
    match_nested_mapping,
)
from slntree.phases.projects import parse_guid

logger = logging.getLogger(__name__)


def _nested_section(lines: Iterable[str]) -> Iterator[str]:
    """Yield the non-blank lines strictly inside the NestedProjects section."""
    inside = False
    for line in lines:
        stripped = line.strip()
        if not inside:
            inside = stripped.startswith(NESTED_SECTION_START)
            continue
        if stripped.startswith(SECTION_END):
            return
        if stripped:
            yield stripped


def extract_nested_mappings(lines: Iterable[str]) -> list[NestedProjectMapping]:
    """Collect child -> parent mappings. No section yields an empty list."""
    mappings: list[NestedProjectMapping] = []
    for line in _nested_section(lines):
        captured = match_nested_mapping(line)
        if captured is None:
            continue

        child, parent = captured
        mappings.append(NestedProjectMapping(
            child_id=parse_guid(child),
            parent_id=parse_guid(parent),
        ))

    logger.debug(f"Found {len(mappings)} nested project mappings")
    return mappings
