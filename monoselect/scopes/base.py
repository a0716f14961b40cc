"""Abstract base selector scope."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from pathlib import Path

from monoselect.models import Project
from monoselect.graph.graph_models import ProjectGraph


@dataclass(frozen=True)
class SelectorContext:
    """Everything a scope needs to resolve one selector value."""
    unscoped_selector: str
    context: str
    graph: ProjectGraph
    include_chain: tuple[Path, ...] = ()  # JSON files currently being resolved


class BaseScope(abc.ABC):
    """Base class for selector scopes (name, git, tag, version-policy, json)."""

    @abc.abstractmethod
    async def evaluate(self, ctx: SelectorContext) -> set[Project]:
        """Resolve ``ctx.unscoped_selector`` into a set of projects."""

    def completions(self) -> list[str]:
        """Known values for shell completion."""
        return []
