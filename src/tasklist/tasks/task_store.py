# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from .task_models import Task

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    In-process task store.

    - ids start at 1 and grow by one per save; they are never reused
    - tasks live until the process exits

    Thread-safety:
    - id assignment + append, and the read snapshot, run under one lock
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = []
        self._next_id = 1
        logger.info("InMemoryTaskStore ready total=%s", self.count_tasks())

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def save(self, task: Task) -> Task:
        with self._lock:
            stored = replace(task, id=self._next_id)
            self._next_id += 1
            self._tasks.append(stored)
        logger.debug("Task saved id=%s", stored.id)
        return stored

    def get_all(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)
