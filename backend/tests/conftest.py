"""
Test configuration and fixtures for the tracker backend tests.
"""
from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from account_tracker.main import app
from account_tracker.core.storage import JsonFileStorage, get_storage
from account_tracker.models.dataset import Dataset
from account_tracker.services import weeks

# Wednesday; its week starts Monday 2024-03-11
FROZEN_TODAY = date(2024, 3, 13)
FROZEN_WEEK = "2024-03-11"


@pytest.fixture
def storage(tmp_path) -> JsonFileStorage:
    """Storage backed by a fresh data file per test."""
    return JsonFileStorage(tmp_path / "tracker_data.json")


@pytest.fixture(autouse=True)
def frozen_today(monkeypatch):
    """Pin "today" so current-week defaults are predictable."""
    monkeypatch.setattr(weeks, "today", lambda: FROZEN_TODAY)
    return FROZEN_TODAY


@pytest.fixture
def client(storage: JsonFileStorage):
    """Test client with the storage dependency pointed at the temp file."""
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def dataset() -> Dataset:
    """Three clients (one inactive) and a handful of responses across two weeks."""
    ds = Dataset()
    created = datetime(2024, 3, 1, tzinfo=timezone.utc)
    ds.add_client("Zephyr", created_at=created)
    ds.add_client("acme", created_at=created)
    retired = ds.add_client("Beta Corp", created_at=created)
    retired.active = False

    ds.add_response(
        email="a@x.com", client_id=1, quality=5, momentum=4, resourcing_load=2,
        week_start=FROZEN_WEEK, submitted_at=datetime(2024, 3, 12, 9, 0, tzinfo=timezone.utc),
    )
    ds.add_response(
        email="b@x.com", client_id=1, quality=3, momentum=None, resourcing_load=4,
        week_start=FROZEN_WEEK, submitted_at=datetime(2024, 3, 13, 9, 0, tzinfo=timezone.utc),
    )
    ds.add_response(
        email="a@x.com", client_id=2, objective_clarity=1,
        week_start=FROZEN_WEEK, submitted_at=datetime(2024, 3, 12, 10, 0, tzinfo=timezone.utc),
    )
    ds.add_response(
        email="a@x.com", client_id=3, quality=2,
        week_start=FROZEN_WEEK, submitted_at=datetime(2024, 3, 12, 11, 0, tzinfo=timezone.utc),
    )
    ds.add_response(
        email="c@x.com", client_id=99, quality=4,
        week_start=FROZEN_WEEK, submitted_at=datetime(2024, 3, 11, 8, 0, tzinfo=timezone.utc),
    )
    ds.add_response(
        email="a@x.com", client_id=1, quality=1,
        week_start="2024-03-04", submitted_at=datetime(2024, 3, 5, 9, 0, tzinfo=timezone.utc),
    )
    return ds


@pytest.fixture
def seeded_storage(storage: JsonFileStorage, dataset: Dataset) -> JsonFileStorage:
    storage.save(dataset)
    return storage
