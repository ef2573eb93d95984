# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires store -> service -> handler into AppState,
- builds the ASGI app around the handler.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from ..api.app import create_app
from ..api.task_handler import TaskHandler
from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_service import TaskService
from ..tasks.task_store import InMemoryTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, task_store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to
    get_settings(); if task_store is None, an in-memory store is used.
    """
    if settings is None:
        settings = get_settings()

    if task_store is None:
        task_store = InMemoryTaskStore()
    service = TaskService(task_store)
    handler = TaskHandler(service)

    logger.debug("Wired %s -> TaskService -> TaskHandler", type(task_store).__name__)
    return AppState(
        settings=settings,
        task_store=task_store,
        task_service=service,
        task_handler=handler,
    )


def build_app(state: AppState) -> FastAPI:
    title = getattr(state.settings, "app_name", "tasklist")
    return create_app(state.task_handler, title=title)
