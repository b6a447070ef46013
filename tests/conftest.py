"""Shared test fixtures and factory functions for the planner API."""

from unittest.mock import MagicMock

import pytest

from planner_api.app import create_app


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_cursor():
    """Mock RealDictCursor that records executed SQL."""
    cursor = MagicMock()
    cursor.fetchone.return_value = None
    cursor.fetchall.return_value = []
    cursor.rowcount = 0
    return cursor


@pytest.fixture
def mock_conn(mock_cursor):
    """Mock connection whose cursor() context yields mock_cursor."""
    conn = MagicMock()
    conn.closed = 0
    conn.cursor.return_value.__enter__.return_value = mock_cursor
    conn.cursor.return_value.__exit__.return_value = False
    return conn


@pytest.fixture
def mock_pool(mock_conn):
    """Mock ThreadedConnectionPool handing out mock_conn."""
    pool = MagicMock()
    pool.getconn.return_value = mock_conn
    return pool


# ---------------------------------------------------------------------------
# Flask fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def app(mock_pool):
    app = create_app(pool=mock_pool)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as c:
        yield c


# ---------------------------------------------------------------------------
# Row factories
# ---------------------------------------------------------------------------

def make_event_row(**kwargs):
    defaults = {
        "event_id": 1,
        "event_name": "anniv",
        "event_location": "Paris",
        "event_description": "Petit anniv",
    }
    defaults.update(kwargs)
    return defaults


def make_person_row(**kwargs):
    defaults = {"person_id": 1, "person_name": "GDVCB", "planner_id": 1}
    defaults.update(kwargs)
    return defaults


def make_planner_row(**kwargs):
    defaults = {"planner_id": 1}
    defaults.update(kwargs)
    return defaults


def make_plan_row(**kwargs):
    defaults = {"plan_id": 1, "event_id": 1, "planner_id": 1}
    defaults.update(kwargs)
    return defaults


def make_organization_row(**kwargs):
    defaults = {"organization_id": 1, "organization_name": "festival_a", "planner_id": 1}
    defaults.update(kwargs)
    return defaults


def make_affiliation_row(**kwargs):
    defaults = {"affiliation_id": 1, "person_id": 1, "organization_id": 1}
    defaults.update(kwargs)
    return defaults


def make_participation_row(**kwargs):
    defaults = {"participation_id": 1, "event_id": 1, "person_id": 1}
    defaults.update(kwargs)
    return defaults
