# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service depends on Protocols instead of concrete implementations,
so storage backends stay swappable and tests can inject fakes.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskStoreError(RuntimeError):
    """Storage backend failure (I/O, connection loss, ...)."""


class TaskRepo(Protocol):
    """
    Task storage.

    save() assigns the next id and returns the stored copy.
    get_all() returns every stored task in insertion order.
    Both may raise TaskStoreError; the in-memory store never does.
    """

    def save(self, task: Task) -> Task: ...
    def get_all(self) -> list[Task]: ...
