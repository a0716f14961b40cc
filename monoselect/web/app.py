"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from monoselect import __version__
from monoselect.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="monoselect", version=__version__)
    app.include_router(router)
    return app
