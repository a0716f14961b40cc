"""Select projects containing files changed relative to a git ref."""

from __future__ import annotations

import asyncio
import logging
import subprocess
from pathlib import Path
from typing import Protocol

from monoselect.errors import ScopeResolutionError
from monoselect.models import Project, SelectionConfig
from monoselect.graph.graph_models import ProjectGraph
from monoselect.scopes.base import BaseScope, SelectorContext

logger = logging.getLogger(__name__)


class ChangeDetector(Protocol):
    async def get_changed_files(self, ref: str) -> list[str]:
        """Workspace-relative POSIX paths of files changed since ``ref``."""
        ...


class GitChangeDetector:
    """Runs ``git diff --name-only --relative`` in the workspace root.

    Paths come back relative to ``repo_root`` even when it is a subdirectory
    of the git checkout, matching workspace-relative project folders.
    """

    def __init__(self, repo_root: Path, timeout: float = 30.0):
        self.repo_root = Path(repo_root)
        self.timeout = timeout

    def _run_diff(self, ref: str) -> list[str]:
        proc = subprocess.run(
            ["git", "diff", "--name-only", "--no-renames", "--relative", ref, "--"],
            cwd=str(self.repo_root),
            capture_output=True,
            text=True,
            timeout=self.timeout,
            check=True,
        )
        return [line.strip() for line in proc.stdout.splitlines() if line.strip()]

    async def get_changed_files(self, ref: str) -> list[str]:
        logger.info("Running git diff against %s in %s", ref, self.repo_root)
        return await asyncio.to_thread(self._run_diff, ref)


class GitChangedScope(BaseScope):
    def __init__(
        self,
        graph: ProjectGraph,
        config: SelectionConfig,
        detector: ChangeDetector | None = None,
    ):
        self.graph = graph
        self.config = config
        self.detector = detector or GitChangeDetector(config.workspace_root, config.git_timeout)

    async def evaluate(self, ctx: SelectorContext) -> set[Project]:
        ref = ctx.unscoped_selector or self.config.default_git_ref
        try:
            changed_files = await self.detector.get_changed_files(ref)
        except subprocess.TimeoutExpired as e:
            raise ScopeResolutionError(
                f"Timed out after {e.timeout}s finding files changed since '{ref}' in {ctx.context}.",
                ctx.context,
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise ScopeResolutionError(
                f"Unable to find files changed since '{ref}' in {ctx.context}: {stderr}",
                ctx.context,
            ) from e
        except OSError as e:
            raise ScopeResolutionError(
                f"Unable to run git for '{ref}' in {ctx.context}: {e}", ctx.context,
            ) from e

        projects: set[Project] = set()
        for path in changed_files:
            project = self.graph.find_project_for_path(path)
            if project is None:
                logger.debug("Changed file %s is outside every project", path)
                continue
            projects.add(project)
        return projects
