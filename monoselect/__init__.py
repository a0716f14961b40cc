"""monoselect: choose which monorepo projects a command should act on."""

from monoselect.errors import (
    CyclicInclusionError,
    MalformedExpressionError,
    ScopeResolutionError,
    SelectorError,
    UnknownFilterError,
    UnknownOperatorError,
    UnknownScopeError,
    WorkspaceError,
)
from monoselect.models import Project, SelectionConfig
from monoselect.selector import ProjectSelector

__version__ = "0.1.0"

__all__ = [
    "Project",
    "ProjectSelector",
    "SelectionConfig",
    "SelectorError",
    "UnknownScopeError",
    "UnknownFilterError",
    "UnknownOperatorError",
    "MalformedExpressionError",
    "ScopeResolutionError",
    "CyclicInclusionError",
    "WorkspaceError",
]
