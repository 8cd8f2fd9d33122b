"""Shared test fixtures for timelog tests."""

from __future__ import annotations

import stat
import sys
import textwrap
from pathlib import Path
from typing import Any, Callable

import pendulum
import pytest

from memory_stores import MemoryRecordStore, MemoryStateStore


@pytest.fixture
def state_store() -> MemoryStateStore:
    return MemoryStateStore()


@pytest.fixture
def record_store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def t0() -> pendulum.DateTime:
    return pendulum.datetime(2024, 1, 17, 9, 0, 0, tz="UTC")


@pytest.fixture
def write_plugin(tmp_path: Path) -> Callable[..., Path]:
    """Write an executable Python plugin script into a plugin directory."""
    plugin_dir = tmp_path / "plugins"
    plugin_dir.mkdir(exist_ok=True)

    def _write(name: str, body: str, executable: bool = True) -> Path:
        path = plugin_dir / f"timelog-{name}"
        path.write_text(
            f"#!{sys.executable}\n" + textwrap.dedent(body).lstrip("\n"),
            encoding="utf-8",
        )
        if executable:
            path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _write


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Point every timelog file at tmp_path for CLI runs."""
    paths = {
        "config": tmp_path / "config" / "config.yaml",
        "state": tmp_path / "data" / "state.yaml",
        "records": tmp_path / "data" / "records.csv",
        "plugins": tmp_path / "plugins",
    }
    monkeypatch.setenv("TIMELOG_CONFIG_PATH", str(paths["config"]))
    monkeypatch.setenv("TIMELOG_STATE_PATH", str(paths["state"]))
    monkeypatch.setenv("TIMELOG_RECORD_PATH", str(paths["records"]))
    monkeypatch.setenv("TIMELOG_PLUGIN_PATH", str(paths["plugins"]))
    monkeypatch.setenv("COLUMNS", "200")
    return paths
