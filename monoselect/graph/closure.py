"""Graph closure operations over project sets.

All functions are pure: they never modify the graph or their inputs.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from monoselect.models import Project
from monoselect.graph.graph_models import ProjectGraph


def _closure(
    adjacency: dict[Project, list[Project]],
    projects: Iterable[Project],
) -> set[Project]:
    """BFS over ``adjacency`` from every project in ``projects``."""
    visited: set[Project] = set()
    queue = deque(projects)

    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        for neighbor in adjacency.get(current, []):
            if neighbor not in visited:
                queue.append(neighbor)

    return visited


def expand_dependencies(graph: ProjectGraph, projects: Iterable[Project]) -> set[Project]:
    """The input projects plus everything they transitively depend on."""
    return _closure(graph.forward, projects)


def expand_consumers(graph: ProjectGraph, projects: Iterable[Project]) -> set[Project]:
    """The input projects plus everything that transitively depends on them."""
    return _closure(graph.reverse, projects)


def union(a: Iterable[Project], b: Iterable[Project]) -> set[Project]:
    return set(a) | set(b)


def intersection(a: Iterable[Project], b: Iterable[Project]) -> set[Project]:
    return set(a) & set(b)


def complement(universe: Iterable[Project], projects: Iterable[Project]) -> set[Project]:
    excluded = set(projects)
    return {p for p in universe if p not in excluded}


def sort_projects(projects: Iterable[Project]) -> list[Project]:
    """Deterministic ordering for output and diagnostics."""
    return sorted(projects, key=lambda p: p.name)
