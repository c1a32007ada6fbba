"""Root conftest — shared test configuration."""

import pytest

from datecalc.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Settings читаются заново в каждом тесте; DATECALC_* из окружения не протекают."""
    monkeypatch.delenv("DATECALC_DEFAULT_UTC_OFFSET_MINUTES", raising=False)
    monkeypatch.delenv("DATECALC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DATECALC_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
