"""Locates datasets and runtime directories.

Lives in `core/` so examples, adapters and the doctor agree on *where* files
are without duplicating path logic. Small datasets (`cats.csv`, the offline
site) ship inside the package under `core/data/`; runtime artifacts go to the
data directory.
"""

from __future__ import annotations

import sys
from pathlib import Path

from core.config import AppSettings, get_settings, get_user_config_dir


def _project_root() -> Path:
    # core/resources_loader.py -> core -> src -> <project_root>
    return Path(__file__).resolve().parents[2]


def bundled_data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


def data_dir(settings: AppSettings | None = None) -> Path:
    """Runtime data directory, created on demand.

    Rules:
    - PATTERN_CATALOG_DATA_DIR (through settings) wins.
    - Frozen builds use a writable per-user path.
    - In development, <project_root>/data.
    """

    settings = settings or get_settings()
    if settings.data_dir is not None:
        path = Path(settings.data_dir)
    elif getattr(sys, "frozen", False):
        path = get_user_config_dir() / "data"
    else:
        path = _project_root() / "data"

    path.mkdir(parents=True, exist_ok=True)
    return path


def get_dataset_path(filename: str, settings: AppSettings | None = None) -> Path | None:
    """Find a dataset by name.

    Order:
    1) <data_dir>/<filename> (user override)
    2) bundled core/data/<filename>
    3) ./<filename> (cwd)
    """

    candidates = [
        data_dir(settings) / filename,
        bundled_data_dir() / filename,
        Path.cwd() / filename,
    ]
    for p in candidates:
        if p.exists() and p.is_file():
            return p
    return None


def require_dataset(filename: str, settings: AppSettings | None = None) -> Path:
    path = get_dataset_path(filename, settings)
    if path is None:
        raise FileNotFoundError(f"Dataset not found: {filename}")
    return path
