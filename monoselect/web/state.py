"""In-memory state for the web API: loaded workspaces, no database."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from monoselect.selector import ProjectSelector


@dataclass
class WorkspaceSession:
    selector: ProjectSelector
    path: str = ""
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class AppState:
    """In-memory state shared by all API routes."""

    def __init__(self):
        self.workspaces: dict[str, WorkspaceSession] = {}

    def add_workspace(self, session: WorkspaceSession) -> None:
        self.workspaces[session.id] = session

    def get_workspace(self, workspace_id: str) -> WorkspaceSession | None:
        return self.workspaces.get(workspace_id)

    def delete_workspace(self, workspace_id: str) -> bool:
        return self.workspaces.pop(workspace_id, None) is not None


# Module-level singleton, imported by all routers
state = AppState()
