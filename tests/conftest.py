"""Shared test fixtures for vincheck."""

import logging

import pytest


@pytest.fixture
def valid_vin():
    """Publicly documented VIN with check digit "3"."""
    return "1HGCM82633A004352"


@pytest.fixture
def wrong_check_digit_vin():
    """1HGCM82633A004352 with its check digit replaced by "0"."""
    return "1HGCM82603A004352"


@pytest.fixture
def isolated_logger(tmp_path, monkeypatch):
    """Point the debug log at a temp dir and reset vincheck handlers."""
    monkeypatch.setattr(
        "platformdirs.user_log_dir", lambda *args, **kwargs: str(tmp_path)
    )
    logger = logging.getLogger("vincheck")
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield tmp_path
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved
