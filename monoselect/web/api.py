"""FastAPI routes for loading workspaces and selecting projects."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from monoselect.errors import SelectorError, WorkspaceError
from monoselect.graph import load_workspace
from monoselect.models import SelectionConfig
from monoselect.selector import ProjectSelector
from monoselect.web.state import WorkspaceSession, state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# --- Request models ---

class WorkspaceRequest(BaseModel):
    path: str

class SelectRequest(BaseModel):
    workspace_id: str
    expression: dict[str, Any]
    context: str = "web request"


def _get_session(workspace_id: str) -> WorkspaceSession:
    session = state.get_workspace(workspace_id)
    if not session:
        raise HTTPException(404, f"Unknown workspace: {workspace_id}")
    return session


# --- Endpoints ---

@router.post("/workspace")
async def open_workspace(req: WorkspaceRequest):
    path = Path(req.path).expanduser().resolve()
    try:
        graph = await asyncio.to_thread(load_workspace, path)
    except FileNotFoundError:
        raise HTTPException(404, f"Workspace file not found: {path}")
    except WorkspaceError as e:
        raise HTTPException(400, str(e))

    selector = ProjectSelector(graph, SelectionConfig(workspace_root=path.parent))
    session = WorkspaceSession(selector=selector, path=str(path))
    state.add_workspace(session)
    return {
        "workspace_id": session.id,
        "projects": [p.name for p in graph.projects],
    }


@router.delete("/workspace/{workspace_id}")
async def close_workspace(workspace_id: str):
    if not state.delete_workspace(workspace_id):
        raise HTTPException(404, f"Unknown workspace: {workspace_id}")
    return {"deleted": workspace_id}


@router.post("/select")
async def select_projects(req: SelectRequest):
    session = _get_session(req.workspace_id)
    try:
        projects = await session.selector.select_json(req.expression, req.context)
    except SelectorError as e:
        logger.info("Selection failed: %s", e)
        raise HTTPException(400, str(e))
    return {
        "workspace_id": session.id,
        "projects": [p.name for p in projects],
    }


@router.get("/completions/{workspace_id}")
async def get_completions(workspace_id: str):
    session = _get_session(workspace_id)
    return {"completions": session.selector.list_completions()}
