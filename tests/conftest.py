# tests/conftest.py
from __future__ import annotations

import logging

import pytest

from amort.core import logs
from tests.utils import make_schedule


# -------- Environment isolation --------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("AMORT_OUTPUT", "AMORT_DECIMALS", "AMORT_DEBUG", "AMORT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _fresh_logger(monkeypatch):
    """Each test gets its own "amort" handlers, bound to that test's sys.stderr."""
    logger = logging.getLogger(logs.LOGGER_NAME)
    monkeypatch.setattr(logs, "_LOGGER", None)
    yield
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)


# -------- Domain fixtures --------
@pytest.fixture
def mortgage_schedule():
    """100k @ 5% over 30 years."""
    return make_schedule()


@pytest.fixture
def small_schedule():
    """100 @ 1.23% over 360 months (rate given as a fraction)."""
    return make_schedule(principal=100.0, rate=0.0123, periods=360)
