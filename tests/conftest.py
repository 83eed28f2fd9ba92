from __future__ import annotations

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from staffboard.core.dependencies import get_notifications, get_store
from staffboard.main import app
from staffboard.services.notification_service import NotificationService
from staffboard.services.record_store import RecordStore, StoreDelays

FIXED_NOW = datetime(2023, 3, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _no_store_latency():
    from staffboard.core.config import settings

    original = (
        settings.STORE_LIST_DELAY,
        settings.STORE_GET_DELAY,
        settings.STORE_WRITE_DELAY,
        settings.STORE_STATS_DELAY,
    )
    settings.STORE_LIST_DELAY = 0.0
    settings.STORE_GET_DELAY = 0.0
    settings.STORE_WRITE_DELAY = 0.0
    settings.STORE_STATS_DELAY = 0.0
    yield
    (
        settings.STORE_LIST_DELAY,
        settings.STORE_GET_DELAY,
        settings.STORE_WRITE_DELAY,
        settings.STORE_STATS_DELAY,
    ) = original


@pytest.fixture
def store():
    return RecordStore(StoreDelays(), clock=lambda: FIXED_NOW)


@pytest.fixture
def notifications(store):
    service = NotificationService(clock=lambda: FIXED_NOW)
    service.attach(store)
    yield service
    service.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(store, notifications):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_notifications] = lambda: notifications
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
