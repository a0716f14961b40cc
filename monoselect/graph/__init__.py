"""Project graph model, builder and closure operations."""

from monoselect.graph.graph_models import ProjectGraph
from monoselect.graph.builder import ProjectGraphBuilder, load_workspace
from monoselect.graph.closure import (
    complement,
    expand_consumers,
    expand_dependencies,
    intersection,
    sort_projects,
    union,
)

__all__ = [
    "ProjectGraph",
    "ProjectGraphBuilder",
    "load_workspace",
    "expand_dependencies",
    "expand_consumers",
    "union",
    "intersection",
    "complement",
    "sort_projects",
]
