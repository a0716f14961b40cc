"""Load and save selector expression JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from monoselect.errors import MalformedExpressionError
from monoselect.expression.models import Expression
from monoselect.expression.parser import parse_expression

logger = logging.getLogger(__name__)


def load_expression_file(path: Path, context: str | None = None) -> Expression:
    """Read and validate an expression file.

    ``FileNotFoundError`` propagates; undecodable or invalid content raises
    ``MalformedExpressionError`` whose message names ``context`` (by default
    the file itself).
    """
    path = Path(path)
    context = context or f"JSON file {path}"
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedExpressionError(
            f"Invalid JSON in selector expression file {path} in {context}: {e}", context,
        ) from e
    logger.debug("Loaded selector expression from %s", path)
    return parse_expression(raw, context)


def try_load_expression_file(path: Path, context: str | None = None) -> Expression | None:
    """Like load_expression_file, but returns None if the file does not exist."""
    try:
        return load_expression_file(path, context)
    except FileNotFoundError:
        return None


def save_expression_file(path: Path, expression: Expression) -> Path:
    path = Path(path)
    path.write_text(json.dumps(expression.to_json(), indent=2) + "\n", encoding="utf-8")
    return path
