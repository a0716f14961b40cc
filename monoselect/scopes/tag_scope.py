"""Select projects by tag or by version policy."""

from __future__ import annotations

from monoselect.models import Project
from monoselect.graph.graph_models import ProjectGraph
from monoselect.scopes.base import BaseScope, SelectorContext


class TagScope(BaseScope):
    """All projects carrying a tag. An unknown tag selects nothing."""

    def __init__(self, graph: ProjectGraph):
        self.graph = graph

    def _index(self) -> dict[str, list[Project]]:
        return self.graph.projects_by_tag

    async def evaluate(self, ctx: SelectorContext) -> set[Project]:
        return set(self._index().get(ctx.unscoped_selector, []))

    def completions(self) -> list[str]:
        return list(self._index())


class VersionPolicyScope(TagScope):
    """All projects governed by a version policy."""

    def _index(self) -> dict[str, list[Project]]:
        return self.graph.projects_by_version_policy
