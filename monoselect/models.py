"""Data models for monoselect."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path


class FilterKind(enum.Enum):
    TO = "to"
    FROM = "from"
    ONLY = "only"


class OperatorKind(enum.Enum):
    NOT = "not"
    AND = "and"
    OR = "or"


# Expected argument count per built-in operator
OPERATOR_ARITY: dict[str, int] = {
    OperatorKind.NOT.value: 1,
    OperatorKind.AND.value: 2,
    OperatorKind.OR.value: 2,
}


@dataclass(eq=False)
class Project:
    """One package in the monorepo graph.

    Compared and hashed by identity: two references are the same project only
    if they are the same object handed out by the graph.
    """
    name: str
    folder: str = ""
    dependency_names: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    version_policy: str | None = None

    def __repr__(self) -> str:
        return f"Project({self.name!r})"


def _env(name: str, default, convert):
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return convert(raw)
    except ValueError:
        raise ValueError(
            f"Environment variable {name} must be a valid {convert.__name__}, got {raw!r}"
        ) from None


@dataclass
class SelectionConfig:
    """Configuration for a selection session.

    Fields left as None are filled from MONOSELECT_* environment variables,
    then from built-in defaults.
    """
    workspace_root: Path = field(default_factory=lambda: Path("."))
    default_git_ref: str | None = None
    git_timeout: float | None = None
    max_include_depth: int | None = None

    def __post_init__(self):
        self.workspace_root = Path(self.workspace_root)
        if self.default_git_ref is None:
            self.default_git_ref = _env("MONOSELECT_GIT_REF", "origin/main", str)
        if self.git_timeout is None:
            self.git_timeout = _env("MONOSELECT_GIT_TIMEOUT", 30.0, float)
        if self.max_include_depth is None:
            self.max_include_depth = _env("MONOSELECT_MAX_INCLUDE_DEPTH", 32, int)
