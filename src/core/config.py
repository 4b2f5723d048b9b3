"""Catalogue configuration.

Centralizes environment variables (pydantic-settings) so the CLI, the runner
and the examples that touch files or HTTP read the same values.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "pattern-catalog"
ENV_PREFIX = "PATTERN_CATALOG_"


def get_user_config_dir() -> Path:
    """Per-user configuration directory, following each platform's convention."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """Read KEY=VALUE pairs, skipping comments and lines without `=`."""

    data: dict[str, str] = {}
    for line in map(str.strip, text.splitlines()):
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key:
            data[key] = value.strip().strip("\"'")
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Merge `values` into the user's global .env, keeping the keys already there.

    `None` values leave the existing entry untouched. Keys are written sorted.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = _parse_env_lines(env_path.read_text(encoding="utf-8")) if env_path.exists() else {}
    merged.update((key, value) for key, value in values.items() if value is not None)

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text(f"# {APP_NAME} user config (.env)\n{body}", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Single configuration contract for the CLI, the runner and the examples."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    data_dir: Path | None = Field(
        default=None,
        description="Directory for runtime artifacts (command queue, observer logs).",
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Default directory for exported run reports.",
    )

    offline_http: bool = Field(
        default=True,
        description="Serve example HTTP traffic from the bundled offline site.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="pattern-catalog/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent by the example downloaders.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    network_latency_seconds: float = Field(
        default=0.0,
        ge=0,
        le=30,
        description="Simulated login latency in the Template Method example.",
    )
    throttle_requests_per_minute: int = Field(
        default=2,
        ge=1,
        le=1000,
        description="Request budget of the throttling middleware.",
    )
    history_max_size: int = Field(
        default=50,
        ge=1,
        le=10_000,
        description="Maximum snapshots kept by the editor history.",
    )


_active_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Settings in effect: the ones installed by `use_settings`, else fresh from env."""

    return _active_settings if _active_settings is not None else AppSettings()


@contextmanager
def use_settings(settings: AppSettings) -> Iterator[AppSettings]:
    """Make `settings` what `get_settings()` returns for the duration of the block."""

    global _active_settings
    previous = _active_settings
    _active_settings = settings
    try:
        yield settings
    finally:
        _active_settings = previous
