from __future__ import annotations

import logging

import pytest

from core.logging_setup import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_is_idempotent():
    configure_logging("INFO")
    configure_logging("debug")

    root = logging.getLogger()
    ours = [h for h in root.handlers if h.get_name() == "pattern-catalog"]
    assert len(ours) == 1
    assert root.level == logging.DEBUG


def test_configure_logging_accepts_numeric_levels():
    configure_logging(logging.ERROR)
    assert logging.getLogger().level == logging.ERROR


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("LOUD")
