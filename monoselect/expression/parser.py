"""Convert untagged selector JSON and CLI selector strings into expression nodes."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from monoselect.errors import MalformedExpressionError
from monoselect.expression.models import Expression, SelectorExpression

# Source JSON key -> explicit node kind
_SHAPE_KEYS: dict[str, str] = {
    "scope": "selector",
    "filter": "filter",
    "op": "operator",
}

_ADAPTER: TypeAdapter = TypeAdapter(Expression)


def _tag(raw: Any, context: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise MalformedExpressionError(
            f"Invalid object encountered in selector expression in {context}.", context,
        )

    present = [key for key in _SHAPE_KEYS if key in raw]
    if len(present) != 1:
        shape = ", ".join(present) if present else "none of scope, filter, op"
        raise MalformedExpressionError(
            f"Selector expression node must have exactly one of 'scope', 'filter' "
            f"or 'op' (found {shape}) in {context}.",
            context,
        )

    kind = _SHAPE_KEYS[present[0]]
    if raw.get("kind", kind) != kind:
        raise MalformedExpressionError(
            f"Selector expression node tagged '{raw['kind']}' has the shape of "
            f"a {kind} in {context}.",
            context,
        )

    tagged = dict(raw)
    tagged["kind"] = kind
    if kind == "filter" and "arg" in raw:
        tagged["arg"] = _tag(raw["arg"], context)
    elif kind == "operator" and isinstance(raw.get("args"), list):
        tagged["args"] = [_tag(arg, context) for arg in raw["args"]]
    return tagged


def parse_expression(raw: Any, context: str = "selector expression") -> Expression:
    """Validate an untagged JSON expression and return the tagged node tree.

    The node kind is decided here from the presence of exactly one of the
    ``scope``/``filter``/``op`` keys, so evaluation never has to guess.
    """
    tagged = _tag(raw, context)
    try:
        return _ADAPTER.validate_python(tagged)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise MalformedExpressionError(
            f"Invalid selector expression in {context}: {details}", context,
        ) from e


def parse_selector(text: str, default_scope: str = "name") -> SelectorExpression:
    """Parse ``<scope>:<value>``; a bare value uses ``default_scope``."""
    scope, sep, value = text.partition(":")
    if not sep or not scope:
        return SelectorExpression(scope=default_scope, value=value if sep else text)
    return SelectorExpression(scope=scope, value=value)
