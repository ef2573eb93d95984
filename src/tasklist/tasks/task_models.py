# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


def format_timestamp(ts: datetime) -> str:
    """RFC 3339 string in UTC with a 'Z' suffix."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC).isoformat().replace("+00:00", "Z")


@dataclass(slots=True, frozen=True)
class Task:
    """
    A to-do item.

    Notes:
    - id == 0 means "not stored yet"; the store assigns the real id on save.
    - tasks are immutable values; the store keeps its own id-stamped copy.
    """

    title: str
    created_at: datetime
    updated_at: datetime
    is_completed: bool = False
    id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "is_completed": self.is_completed,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }
