"""Scope registry: maps scope names to selector scope implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from monoselect.models import SelectionConfig
from monoselect.graph.graph_models import ProjectGraph
from monoselect.scopes.base import BaseScope
from monoselect.scopes.git_scope import ChangeDetector, GitChangedScope
from monoselect.scopes.json_file_scope import JsonFileScope
from monoselect.scopes.name_scope import NameScope
from monoselect.scopes.tag_scope import TagScope, VersionPolicyScope

if TYPE_CHECKING:
    from monoselect.selector import ProjectSelector


class ScopeRegistry:
    """Scope lookup owned by a single selection session."""

    def __init__(self):
        self._scopes: dict[str, BaseScope] = {}

    def register(self, name: str, scope: BaseScope) -> None:
        if name in self._scopes:
            raise ValueError(f"Selector scope '{name}' is already registered")
        self._scopes[name] = scope

    def resolve(self, name: str) -> BaseScope | None:
        return self._scopes.get(name)

    def names(self) -> list[str]:
        return list(self._scopes)

    def list_completions(self) -> list[str]:
        """Every known ``<scope>:<value>`` pair, in registration order."""
        completions: list[str] = []
        for name, scope in self._scopes.items():
            completions.extend(f"{name}:{value}" for value in scope.completions())
        return completions

    def __contains__(self, name: object) -> bool:
        return name in self._scopes


def create_default_registry(
    graph: ProjectGraph,
    selector: ProjectSelector,
    config: SelectionConfig,
    change_detector: ChangeDetector | None = None,
) -> ScopeRegistry:
    """Registry with the built-in name, git, tag, version-policy and json scopes."""
    registry = ScopeRegistry()
    registry.register("name", NameScope(graph))
    registry.register("git", GitChangedScope(graph, config, change_detector))
    registry.register("tag", TagScope(graph))
    registry.register("version-policy", VersionPolicyScope(graph))
    registry.register("json", JsonFileScope(config, selector))
    return registry
