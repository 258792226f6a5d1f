"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state: every
platformdirs lookup is pointed at *tmp_path* and the logger/config
singletons are reset around each test.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from taskpad.adapters import InMemoryStorage
from taskpad.services import PersistenceStore, TaskCollection


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    """Close and detach the log file handlers, leaving pytest's own in place."""
    logger = logging.getLogger("taskpad")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Redirect config, data and log directories into *tmp_path*."""
    import taskpad.utils.logger as logger_mod
    from taskpad.services.config_service import get_config_service

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    log_dir = str(tmp_path / "logs")

    logger_mod._logger = None
    _drop_file_handlers()
    get_config_service.cache_clear()

    with (
        patch("taskpad.services.config_service.user_config_dir", return_value=config_dir),
        patch("taskpad.services.config_service.user_data_dir", return_value=data_dir),
        patch("taskpad.adapters.json_file.user_data_dir", return_value=data_dir),
        patch("taskpad.utils.logger.user_log_dir", return_value=log_dir),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    _drop_file_handlers()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Engine fixtures
# ---------------------------------------------------------------------------


class FakeClock:
    """Clock returning a fixed instant until advanced."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture()
def clock():
    return FakeClock(datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture()
def storage():
    return InMemoryStorage()


@pytest.fixture()
def store(storage):
    return PersistenceStore(storage)


@pytest.fixture()
def collection(store, clock):
    return TaskCollection(store, clock=clock)
