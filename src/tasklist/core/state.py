# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..api.task_handler import TaskHandler
from ..tasks.task_service import TaskService
from .ports import TaskRepo


@dataclass(slots=True)
class AppState:
    # Settings are kept on the state so the entry point reads one object.
    settings: object

    task_store: TaskRepo
    task_service: TaskService
    task_handler: TaskHandler
