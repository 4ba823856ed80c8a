"""Dependency injection for FastAPI — application settings."""

from __future__ import annotations

from fastapi import Request

from tagmatch.settings import Settings


def get_settings(request: Request) -> Settings:
    """FastAPI ``Depends`` provider for the settings the app was created with."""
    settings: Settings = request.app.state.settings
    return settings
