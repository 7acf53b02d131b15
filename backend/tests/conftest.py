"""
Shared fixtures: in-memory database and batch item builders.
"""

import os

# Must be set before gps_collector.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

import copy

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gps_collector.models.base import Base
from gps_collector.features.points import models  # noqa


BASE_ITEM = {
    "category": "walk",
    "capturedAt": "2026-05-01T10:00:00Z",
    "user": "  alice  ",
    "point1": {"lat": 52.0, "lon": 4.0, "accuracyM": 5.0, "timestampMs": 1000},
    "point2": {"lat": 52.001, "lon": 4.001, "accuracyM": 4.0, "timestampMs": 3000},
}


# =============================================================================
# Database
# =============================================================================

@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# Payload builders
# =============================================================================

@pytest.fixture
def make_item():
    """
    Build a valid batch item, with optional overrides.

    Top-level keys are replaced; `point1`/`point2` dicts are merged.
    A value of None removes the key.
    """
    def _make(**overrides):
        item = copy.deepcopy(BASE_ITEM)
        for key, value in overrides.items():
            if value is None:
                item.pop(key, None)
            elif key in ("point1", "point2") and isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    if sub_value is None:
                        item[key].pop(sub_key, None)
                    else:
                        item[key][sub_key] = sub_value
            else:
                item[key] = value
        return item

    return _make
