from __future__ import annotations

from fastapi import Request

from app.settings import Settings
from app.user_registry import UserRegistry


def get_settings_dep(request: Request) -> Settings:
    """FastAPI dependency for settings.

    Returns the Settings the app was built with in app.main.create_app, which
    itself defaults to app.settings.get_settings (canonical constructor).
    """
    return request.app.state.settings


def get_registry(request: Request) -> UserRegistry:
    # One registry per application instance, created in app.main.create_app.
    return request.app.state.registry
