"""Select a single project by its exact name."""

from __future__ import annotations

from monoselect.errors import ScopeResolutionError
from monoselect.models import Project
from monoselect.graph.graph_models import ProjectGraph
from monoselect.scopes.base import BaseScope, SelectorContext


class NameScope(BaseScope):
    def __init__(self, graph: ProjectGraph):
        self.graph = graph

    async def evaluate(self, ctx: SelectorContext) -> set[Project]:
        project = self.graph.get(ctx.unscoped_selector)
        if project is None:
            raise ScopeResolutionError(
                f"Unable to find project '{ctx.unscoped_selector}' in {ctx.context}.",
                ctx.context,
            )
        return {project}

    def completions(self) -> list[str]:
        return [p.name for p in self.graph.projects]
