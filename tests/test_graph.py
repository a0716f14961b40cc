"""Tests for the project graph builder and closure operations."""

import json
from pathlib import Path

import pytest

from monoselect.errors import WorkspaceError
from monoselect.models import Project
from monoselect.graph import (
    ProjectGraphBuilder,
    complement,
    expand_consumers,
    expand_dependencies,
    intersection,
    load_workspace,
    sort_projects,
    union,
)

FIXTURES = Path(__file__).parent / "fixtures"


# ── Helpers ───────────────────────────────────────────────────

def _build(edges, tags=None):
    """Build a graph from {name: [dependency names]}."""
    tags = tags or {}
    projects = [
        Project(name=name, folder=f"libs/{name}", dependency_names=list(deps),
                tags=list(tags.get(name, [])))
        for name, deps in edges.items()
    ]
    return ProjectGraphBuilder().build(projects)


def _names(projects):
    return {p.name for p in projects}


def _chain():
    # A -> B -> C
    return _build({"A": ["B"], "B": ["C"], "C": []})


def _diamond():
    # A -> B -> D, A -> C -> D, E stands alone
    return _build({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": [], "E": []})


def _cycle():
    # X -> Y -> Z -> X, Z -> W
    return _build({"X": ["Y"], "Y": ["Z"], "Z": ["X", "W"], "W": []})


# ── Builder ───────────────────────────────────────────────────

class TestProjectGraphBuilder:
    def test_build_empty(self):
        graph = ProjectGraphBuilder().build([])
        assert graph.projects == []
        assert graph.forward == {}

    def test_forward_and_reverse_edges(self):
        graph = _chain()
        a, b, c = (graph.get(n) for n in "ABC")
        assert graph.forward[a] == [b]
        assert graph.forward[b] == [c]
        assert graph.reverse[c] == [b]
        assert graph.reverse[b] == [a]
        assert graph.reverse[a] == []

    def test_unknown_dependency_ignored(self):
        graph = _build({"A": ["left-pad", "B"], "B": []})
        assert _names(graph.forward[graph.get("A")]) == {"B"}

    def test_duplicate_edges_collapse(self):
        graph = _build({"A": ["B", "B"], "B": []})
        assert len(graph.forward[graph.get("A")]) == 1
        assert len(graph.reverse[graph.get("B")]) == 1

    def test_self_edge_dropped(self):
        graph = _build({"A": ["A"]})
        assert graph.forward[graph.get("A")] == []

    def test_duplicate_project_name_rejected(self):
        with pytest.raises(WorkspaceError, match="Duplicate project name 'A'"):
            ProjectGraphBuilder().build([Project(name="A"), Project(name="A")])

    def test_tag_and_policy_indexes(self):
        projects = [
            Project(name="A", tags=["frontend"], version_policy="stable"),
            Project(name="B", tags=["frontend", "legacy"]),
            Project(name="C", tags=["backend"], version_policy="stable"),
        ]
        graph = ProjectGraphBuilder().build(projects)
        assert list(graph.projects_by_tag) == ["frontend", "legacy", "backend"]
        assert _names(graph.projects_by_tag["frontend"]) == {"A", "B"}
        assert _names(graph.projects_by_version_policy["stable"]) == {"A", "C"}

    def test_find_project_for_path_prefers_deepest_folder(self):
        projects = [
            Project(name="outer", folder="libs/outer"),
            Project(name="inner", folder="libs/outer/inner"),
        ]
        graph = ProjectGraphBuilder().build(projects)
        assert graph.find_project_for_path("libs/outer/src/a.ts").name == "outer"
        assert graph.find_project_for_path("libs/outer/inner/src/a.ts").name == "inner"
        assert graph.find_project_for_path("libs/outerwear/a.ts") is None
        assert graph.find_project_for_path("README.md") is None


class TestLoadWorkspace:
    def test_load_fixture(self):
        graph = load_workspace(FIXTURES / "workspace.json")
        assert [p.name for p in graph.projects] == ["app", "ui", "core", "tools"]
        assert graph.get("app").version_policy == "stable"
        assert _names(graph.forward[graph.get("app")]) == {"ui", "core"}
        assert graph.forward[graph.get("tools")] == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_workspace(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "workspace.json"
        path.write_text("{not json")
        with pytest.raises(WorkspaceError, match="Unable to read"):
            load_workspace(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "workspace.json"
        path.write_bytes(b'{"projects": [{"name": "\xff"}]}')
        with pytest.raises(WorkspaceError, match="Unable to read"):
            load_workspace(path)

    def test_invalid_shape(self, tmp_path):
        path = tmp_path / "workspace.json"
        path.write_text(json.dumps({"projects": [{"folder": "x"}]}))
        with pytest.raises(WorkspaceError, match="Invalid workspace"):
            load_workspace(path)


# ── Closures ──────────────────────────────────────────────────

class TestExpandDependencies:
    def test_chain(self):
        graph = _chain()
        assert _names(expand_dependencies(graph, {graph.get("A")})) == {"A", "B", "C"}
        assert _names(expand_dependencies(graph, {graph.get("C")})) == {"C"}

    def test_diamond_no_duplicates(self):
        graph = _diamond()
        result = expand_dependencies(graph, {graph.get("A")})
        assert _names(result) == {"A", "B", "C", "D"}
        assert len(result) == 4

    def test_cycle_terminates(self):
        graph = _cycle()
        assert _names(expand_dependencies(graph, {graph.get("Y")})) == {"X", "Y", "Z", "W"}

    def test_empty_input(self):
        assert expand_dependencies(_chain(), set()) == set()

    def test_does_not_mutate_input(self):
        graph = _chain()
        seed = {graph.get("A")}
        expand_dependencies(graph, seed)
        assert _names(seed) == {"A"}

    def test_superset_and_idempotent(self):
        for graph in (_chain(), _diamond(), _cycle()):
            for project in graph.projects:
                once = expand_dependencies(graph, {project})
                assert project in once
                assert expand_dependencies(graph, once) == once


class TestExpandConsumers:
    def test_chain(self):
        graph = _chain()
        assert _names(expand_consumers(graph, {graph.get("C")})) == {"A", "B", "C"}
        assert _names(expand_consumers(graph, {graph.get("A")})) == {"A"}

    def test_diamond(self):
        graph = _diamond()
        assert _names(expand_consumers(graph, {graph.get("D")})) == {"A", "B", "C", "D"}
        assert _names(expand_consumers(graph, {graph.get("B")})) == {"A", "B"}

    def test_cycle_terminates(self):
        graph = _cycle()
        assert _names(expand_consumers(graph, {graph.get("W")})) == {"X", "Y", "Z", "W"}

    def test_idempotent(self):
        for graph in (_chain(), _diamond(), _cycle()):
            for project in graph.projects:
                once = expand_consumers(graph, {project})
                assert expand_consumers(graph, once) == once

    def test_dual_of_dependencies_under_edge_reversal(self):
        for graph in (_chain(), _diamond(), _cycle()):
            flipped = graph.reversed()
            for project in graph.projects:
                assert expand_dependencies(graph, {project}) == expand_consumers(flipped, {project})
                assert expand_consumers(graph, {project}) == expand_dependencies(flipped, {project})


# ── Set algebra ───────────────────────────────────────────────

class TestSetAlgebra:
    def setup_method(self):
        self.graph = _diamond()
        a, b, c, d, e = (self.graph.get(n) for n in "ABCDE")
        self.x = {a, b}
        self.y = {b, c, d}
        self.z = {d, e}

    def test_union_commutative_associative(self):
        assert union(self.x, self.y) == union(self.y, self.x)
        assert union(union(self.x, self.y), self.z) == union(self.x, union(self.y, self.z))
        assert _names(union(self.x, self.y)) == {"A", "B", "C", "D"}

    def test_intersection_commutative_associative(self):
        assert intersection(self.x, self.y) == intersection(self.y, self.x)
        assert (intersection(intersection(self.x, self.y), self.z)
                == intersection(self.x, intersection(self.y, self.z)))
        assert _names(intersection(self.x, self.y)) == {"B"}

    def test_complement(self):
        universe = self.graph.projects
        assert _names(complement(universe, self.x)) == {"C", "D", "E"}
        assert complement(universe, complement(universe, self.x)) == self.x
        assert complement(universe, set()) == set(universe)

    def test_identity_not_name_equality(self):
        impostor = Project(name="A")
        assert intersection({self.graph.get("A")}, {impostor}) == set()

    def test_sort_projects(self):
        assert [p.name for p in sort_projects(self.y | self.x)] == ["A", "B", "C", "D"]
