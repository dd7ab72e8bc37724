import os

# app.db.mongo refuses to import without it; motor does not connect until first use
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")

import pytest
from mongomock_motor import AsyncMongoMockClient

from app.db.tracker_store import TrackerStore


@pytest.fixture
def store():
    db = AsyncMongoMockClient()["quit_tracker_test"]
    return TrackerStore(db["quit_time"], db["daily_counts"])
