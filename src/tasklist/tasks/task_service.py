# src/tasklist/tasks/task_service.py

from __future__ import annotations

"""
Task service.

Holds the only business rule of the app (a task needs a non-empty title)
and delegates everything else to the injected TaskRepo.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskValidationError(ValueError):
    """Input rejected by the service."""


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TaskService:
    def __init__(self, repo: TaskRepo, *, now: Callable[[], datetime] = _utcnow) -> None:
        self._repo = repo
        self._now = now

    def create_task(self, title: str) -> Task:
        # No trimming: " " is a valid title.
        if title == "":
            raise TaskValidationError("title must not be empty")

        ts = self._now()
        stored = self._repo.save(Task(title=title, created_at=ts, updated_at=ts))
        logger.info("Task created id=%s", stored.id)
        return stored

    def get_tasks(self) -> list[Task]:
        return self._repo.get_all()
