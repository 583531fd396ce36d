from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from time_service import clock
from time_service.config import Settings
from time_service.main import create_app

FROZEN_UTC = datetime(2018, 5, 1, 21, 47, 53, 412000, tzinfo=timezone.utc)


class FrozenDatetime(datetime):
    """datetime whose now() is pinned to FROZEN_UTC (naive when no tz is asked for)."""

    @classmethod
    def now(cls, tz=None):
        if tz is None:
            return FROZEN_UTC.replace(tzinfo=None)
        return FROZEN_UTC.astimezone(tz)


@pytest.fixture
def frozen_clock(monkeypatch):
    monkeypatch.setattr(clock, "datetime", FrozenDatetime)
    return FROZEN_UTC


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
