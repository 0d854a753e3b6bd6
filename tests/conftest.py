"""
Shared pytest fixtures for untd tests.

The clock is always injected so that every test is independent of the real
wall clock and of the machine's local timezone.
"""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from untd.services.date_output_service import DateOutputService

JST = ZoneInfo("Asia/Tokyo")

# 2025-03-24T09:38:29+09:00
FIXED_NOW_UTC = datetime(2025, 3, 24, 0, 38, 29, tzinfo=timezone.utc)
FIXED_TIMESTAMP = 1742776709


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW_UTC


@pytest.fixture
def jst_anchor() -> datetime:
    return datetime(2025, 3, 24, 9, 38, 29, tzinfo=JST)


@pytest.fixture
def service() -> DateOutputService:
    return DateOutputService(clock=lambda: FIXED_NOW_UTC)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove UNTD_* variables and keep a stray .env file from leaking in."""
    for key in ("UNTD_TIMEZONE", "UNTD_FORMAT", "UNTD_COPY", "UNTD_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("untd.config.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch
