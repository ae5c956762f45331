"""Nesting relation as a networkx.DiGraph, for diagnostics."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

import networkx as nx

from slntree.config import NestedProjectMapping


class NestingGraph:
    """Wrapper around networkx.DiGraph with child -> parent edges.

    Only the first mapping per child is kept, matching how the hierarchy
    builder resolves duplicates.
    """

    def __init__(self) -> None:
        self.graph = nx.DiGraph()

    @classmethod
    def from_mappings(cls, mappings: Iterable[NestedProjectMapping]) -> NestingGraph:
        ng = cls()
        for mapping in mappings:
            ng.add_mapping(mapping)
        return ng

    def add_mapping(self, mapping: NestedProjectMapping) -> None:
        if mapping.child_id in self.graph and self.graph.out_degree(mapping.child_id) > 0:
            return
        self.graph.add_edge(mapping.child_id, mapping.parent_id)

    def parent_of(self, project_id: uuid.UUID) -> uuid.UUID | None:
        if project_id not in self.graph:
            return None
        return next(iter(self.graph.successors(project_id)), None)

    def depth(self, project_id: uuid.UUID) -> int:
        """Number of ancestors above the project. Cycles are not followed twice."""
        seen: set[uuid.UUID] = {project_id}
        depth = 0
        current = self.parent_of(project_id)
        while current is not None and current not in seen:
            seen.add(current)
            depth += 1
            current = self.parent_of(current)
        return depth

    def find_cycles(self) -> list[list[uuid.UUID]]:
        """Return each cycle in the relation as a list of project ids."""
        return [list(cycle) for cycle in nx.simple_cycles(self.graph)]

    def edge_count(self) -> int:
        return self.graph.number_of_edges()
