from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from patterns.command.real_world import Queue
from patterns.mediator.real_world import reset_events
from patterns.singleton.real_world import Singleton


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Every test gets its own data dir, offline HTTP and no latency."""

    data = tmp_path / "data"
    monkeypatch.setenv("PATTERN_CATALOG_DATA_DIR", str(data))
    monkeypatch.setenv("PATTERN_CATALOG_OFFLINE_HTTP", "true")
    monkeypatch.setenv("PATTERN_CATALOG_NETWORK_LATENCY_SECONDS", "0")
    monkeypatch.setenv("PATTERN_CATALOG_THROTTLE_REQUESTS_PER_MINUTE", "2")
    monkeypatch.setenv("PATTERN_CATALOG_HISTORY_MAX_SIZE", "50")
    monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "WARNING")
    monkeypatch.chdir(tmp_path)
    yield data
    Queue.reset()
    Singleton.reset_instances()
    reset_events()


@pytest.fixture
def data_path(isolated_env: Path) -> Path:
    return isolated_env
