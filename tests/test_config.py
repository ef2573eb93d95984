# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.config import DEFAULT_PORT, Settings, get_settings

ENV_VARS = (
    "TASKLIST_APP_NAME",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_LOG_TO_FILE",
    "TASKLIST_HOST",
    "TASKLIST_PORT",
    "TASKLIST_DATA_DIR",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()

    assert s.app_name == "tasklist"
    assert s.log_level == "INFO"
    assert s.log_to_file is False
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.data_dir == Path(".local/tasklist")


def test_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TASKLIST_APP_NAME", "todo")
    clean_env.setenv("TASKLIST_LOG_LEVEL", "debug")
    clean_env.setenv("TASKLIST_LOG_TO_FILE", "yes")
    clean_env.setenv("TASKLIST_HOST", "127.0.0.1")
    clean_env.setenv("TASKLIST_PORT", "9090")
    clean_env.setenv("TASKLIST_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is True
    assert s.host == "127.0.0.1"
    assert s.port == 9090
    assert s.data_dir == tmp_path


@pytest.mark.parametrize("raw", ["abc", "0", "70000", "-1", "  "])
def test_bad_port_falls_back_to_default(clean_env: pytest.MonkeyPatch, raw: str) -> None:
    clean_env.setenv("TASKLIST_PORT", raw)
    assert Settings.from_env().port == DEFAULT_PORT


def test_settings_are_frozen(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    with pytest.raises(AttributeError):
        s.port = 1  # type: ignore[misc]


def test_get_settings_returns_shared_instance() -> None:
    assert get_settings() is get_settings()
