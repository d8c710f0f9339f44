"""FastAPI dependency injection — per-app settings & services."""

from __future__ import annotations

from fastapi import Request

from wolgate.config import Settings
from wolgate.services.wake_service import WakeService


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_wake_service(request: Request) -> WakeService:
    return request.app.state.wake_service
