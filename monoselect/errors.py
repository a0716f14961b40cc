"""Exceptions raised while resolving project selections."""

from __future__ import annotations

from pathlib import Path


class SelectorError(Exception):
    """A user-facing error in a selector expression.

    The message always names the context the expression came from
    (e.g. "command-line argument --to" or "JSON file x.json in ...").
    """

    def __init__(self, message: str, context: str = ""):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class UnknownScopeError(SelectorError):
    def __init__(self, scope: str, value: str, context: str):
        super().__init__(
            f"Unknown selector scope '{scope}' for value '{value}' in {context}.",
            context,
        )
        self.scope = scope
        self.value = value


class UnknownFilterError(SelectorError):
    def __init__(self, filter_name: str, context: str):
        super().__init__(
            f"Unknown filter '{filter_name}' encountered in selector expression in {context}.",
            context,
        )
        self.filter = filter_name


class UnknownOperatorError(SelectorError):
    def __init__(self, op: str, context: str):
        super().__init__(
            f"Unknown operator '{op}' in selector expression in {context}.",
            context,
        )
        self.op = op


class MalformedExpressionError(SelectorError):
    """Raised for nodes that match none of the selector/filter/operator shapes."""


class ScopeResolutionError(SelectorError):
    """A scope could not resolve its value (missing project, file, git failure)."""


class CyclicInclusionError(SelectorError):
    def __init__(self, message: str, chain: tuple[Path, ...], context: str):
        super().__init__(message, context)
        self.chain = chain


class WorkspaceError(Exception):
    """The workspace description could not be loaded."""
