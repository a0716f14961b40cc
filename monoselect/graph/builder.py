"""Project graph builder: resolves declared dependency names into edges."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from monoselect.errors import WorkspaceError
from monoselect.models import Project
from monoselect.graph.graph_models import ProjectGraph

logger = logging.getLogger(__name__)


class ProjectEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    folder: str = ""
    dependencies: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    version_policy: str | None = Field(default=None, alias="versionPolicy")


class WorkspaceFile(BaseModel):
    projects: list[ProjectEntry]


class ProjectGraphBuilder:
    """Build a ProjectGraph from a list of projects."""

    def build(self, projects: list[Project]) -> ProjectGraph:
        graph = ProjectGraph()

        # Step 1: nodes and indexes
        for project in projects:
            if project.name in graph.by_name:
                raise WorkspaceError(f"Duplicate project name '{project.name}'")
            graph.projects.append(project)
            graph.by_name[project.name] = project
            graph.forward[project] = []
            graph.reverse[project] = []

            for tag in project.tags:
                graph.projects_by_tag.setdefault(tag, []).append(project)
            if project.version_policy:
                graph.projects_by_version_policy.setdefault(
                    project.version_policy, []
                ).append(project)

        # Step 2: edges, reverse view precomputed alongside
        for project in graph.projects:
            for dep_name in project.dependency_names:
                target = graph.by_name.get(dep_name)
                if target is None:
                    logger.debug(
                        "%s depends on %s, which is not a workspace project",
                        project.name, dep_name,
                    )
                    continue
                if target is not project:
                    self._add_edge(graph, project, target)

        return graph

    @staticmethod
    def _add_edge(graph: ProjectGraph, source: Project, target: Project) -> None:
        # Avoid duplicate edges
        if target in graph.forward[source]:
            return
        graph.forward[source].append(target)
        graph.reverse[target].append(source)


def load_workspace(path: Path) -> ProjectGraph:
    """Load a workspace JSON file and build its project graph."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise WorkspaceError(f"Unable to read workspace file {path}: {e}") from e

    try:
        workspace = WorkspaceFile.model_validate(raw)
    except ValidationError as e:
        raise WorkspaceError(f"Invalid workspace file {path}: {e}") from e

    projects = [
        Project(
            name=entry.name,
            folder=entry.folder,
            dependency_names=list(entry.dependencies),
            tags=list(entry.tags),
            version_policy=entry.version_policy,
        )
        for entry in workspace.projects
    ]
    graph = ProjectGraphBuilder().build(projects)
    logger.info("Loaded %d projects from %s", len(graph.projects), path)
    return graph
