"""Web API for project selection."""

from monoselect.web.app import create_app

__all__ = ["create_app"]
