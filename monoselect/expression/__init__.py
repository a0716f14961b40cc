"""Selector expression nodes, parsing and JSON file loading."""

from monoselect.expression.models import (
    Expression,
    FilterExpression,
    OperatorExpression,
    SelectorExpression,
)
from monoselect.expression.parser import parse_expression, parse_selector
from monoselect.expression.loader import (
    load_expression_file,
    save_expression_file,
    try_load_expression_file,
)

__all__ = [
    "Expression",
    "SelectorExpression",
    "FilterExpression",
    "OperatorExpression",
    "parse_expression",
    "parse_selector",
    "load_expression_file",
    "try_load_expression_file",
    "save_expression_file",
]
