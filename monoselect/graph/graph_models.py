"""Data model for the project dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from monoselect.models import Project


@dataclass
class ProjectGraph:
    projects: list[Project] = field(default_factory=list)  # discovery order
    by_name: dict[str, Project] = field(default_factory=dict)
    forward: dict[Project, list[Project]] = field(default_factory=dict)  # project -> dependencies
    reverse: dict[Project, list[Project]] = field(default_factory=dict)  # project -> consumers
    projects_by_tag: dict[str, list[Project]] = field(default_factory=dict)
    projects_by_version_policy: dict[str, list[Project]] = field(default_factory=dict)

    def get(self, name: str) -> Project | None:
        return self.by_name.get(name)

    def find_project_for_path(self, path: str) -> Project | None:
        """Return the project whose folder most specifically contains ``path``."""
        parts = PurePosixPath(path.replace("\\", "/")).parts
        best: Project | None = None
        best_depth = -1
        for project in self.projects:
            if not project.folder:
                continue
            folder_parts = PurePosixPath(project.folder).parts
            depth = len(folder_parts)
            if depth > best_depth and parts[:depth] == folder_parts:
                best = project
                best_depth = depth
        return best

    def reversed(self) -> ProjectGraph:
        """Same projects with every dependency edge flipped."""
        return ProjectGraph(
            projects=list(self.projects),
            by_name=dict(self.by_name),
            forward={p: list(deps) for p, deps in self.reverse.items()},
            reverse={p: list(deps) for p, deps in self.forward.items()},
            projects_by_tag=dict(self.projects_by_tag),
            projects_by_version_policy=dict(self.projects_by_version_policy),
        )
