"""Project selector: evaluates selector expressions against a project graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from monoselect.errors import (
    MalformedExpressionError,
    UnknownFilterError,
    UnknownOperatorError,
    UnknownScopeError,
)
from monoselect.expression.models import (
    Expression,
    FilterExpression,
    OperatorExpression,
    SelectorExpression,
)
from monoselect.expression.parser import parse_expression
from monoselect.graph import closure
from monoselect.graph.graph_models import ProjectGraph
from monoselect.models import FilterKind, OperatorKind, Project, SelectionConfig
from monoselect.scopes.base import SelectorContext
from monoselect.scopes.git_scope import ChangeDetector
from monoselect.scopes.registry import ScopeRegistry, create_default_registry

logger = logging.getLogger(__name__)


class ProjectSelector:
    """Select a subset of a monorepo's projects with selector expressions.

    Each instance owns its scope registry, so sessions never share state.
    The context string passed to the select methods is used only to build
    error messages for user input.
    """

    def __init__(
        self,
        graph: ProjectGraph,
        config: SelectionConfig | None = None,
        change_detector: ChangeDetector | None = None,
        registry: ScopeRegistry | None = None,
    ):
        self.graph = graph
        self.config = config or SelectionConfig()
        self.registry = registry or create_default_registry(
            graph, self, self.config, change_detector,
        )

    async def select_expression(
        self,
        expr: Expression,
        context: str,
        include_chain: tuple[Path, ...] = (),
    ) -> set[Project]:
        if isinstance(expr, SelectorExpression):
            return await self._evaluate_selector(expr, context, include_chain)
        if isinstance(expr, FilterExpression):
            return await self._evaluate_filter(expr, context, include_chain)
        if isinstance(expr, OperatorExpression):
            return await self._evaluate_operator(expr, context, include_chain)
        # Schema validation should have rejected this already
        raise MalformedExpressionError(
            f"Invalid object encountered in selector expression in {context}.", context,
        )

    async def select(self, expr: Expression, context: str) -> list[Project]:
        """Evaluate ``expr`` and return the projects sorted by name."""
        return closure.sort_projects(await self.select_expression(expr, context))

    async def select_json(self, raw: Any, context: str) -> list[Project]:
        """Validate an untagged JSON expression, then select with it."""
        return await self.select(parse_expression(raw, context), context)

    def list_completions(self) -> list[str]:
        return self.registry.list_completions()

    async def _evaluate_selector(
        self,
        expr: SelectorExpression,
        context: str,
        include_chain: tuple[Path, ...],
    ) -> set[Project]:
        scope = self.registry.resolve(expr.scope)
        if scope is None:
            raise UnknownScopeError(expr.scope, expr.value, context)

        logger.debug("Evaluating %s:%s in %s", expr.scope, expr.value, context)
        return await scope.evaluate(SelectorContext(
            unscoped_selector=expr.value,
            context=context,
            graph=self.graph,
            include_chain=include_chain,
        ))

    async def _evaluate_filter(
        self,
        expr: FilterExpression,
        context: str,
        include_chain: tuple[Path, ...],
    ) -> set[Project]:
        if expr.filter == FilterKind.TO.value:
            arg = await self.select_expression(expr.arg, context, include_chain)
            return closure.expand_dependencies(self.graph, arg)
        if expr.filter == FilterKind.FROM.value:
            arg = await self.select_expression(expr.arg, context, include_chain)
            consumers = closure.expand_consumers(self.graph, arg)
            return closure.expand_dependencies(self.graph, consumers)
        if expr.filter == FilterKind.ONLY.value:
            # "only" is a no-op in a generic selector expression
            return await self.select_expression(expr.arg, context, include_chain)
        raise UnknownFilterError(expr.filter, context)

    async def _evaluate_operator(
        self,
        expr: OperatorExpression,
        context: str,
        include_chain: tuple[Path, ...],
    ) -> set[Project]:
        if expr.op == OperatorKind.NOT.value:
            result = await self.select_expression(expr.args[0], context, include_chain)
            return closure.complement(self.graph.projects, result)
        if expr.op in (OperatorKind.AND.value, OperatorKind.OR.value):
            # No short-circuit: both operands are evaluated, left first
            left = await self.select_expression(expr.args[0], context, include_chain)
            right = await self.select_expression(expr.args[1], context, include_chain)
            if expr.op == OperatorKind.AND.value:
                return closure.intersection(left, right)
            return closure.union(left, right)
        raise UnknownOperatorError(expr.op, context)
