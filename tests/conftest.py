# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tasklist.cli.bootstrap import build_app, create_initial_state
from tasklist.core.state import AppState
from tasklist.tasks.task_service import TaskService
from tasklist.tasks.task_store import InMemoryTaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_to_file=False,
        host="127.0.0.1",
        port=8080,
        data_dir=tmp_path,
    )


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def service(store: InMemoryTaskStore, clock: FakeClock) -> TaskService:
    return TaskService(store, now=clock)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired exactly as the entry point does it (real in-memory store)."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def app(state: AppState) -> FastAPI:
    return build_app(state)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
