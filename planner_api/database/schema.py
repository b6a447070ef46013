"""Table definitions for the planner database.

Tables are created in dependency order so every REFERENCES clause points
at an existing table. Statements use IF NOT EXISTS, so ``init_schema`` can
run against a database that is already set up.
"""

import logging

logger = logging.getLogger(__name__)

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS planner (
        planner_id SERIAL PRIMARY KEY
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS event (
        event_id SERIAL PRIMARY KEY,
        event_name TEXT NOT NULL,
        event_location TEXT NOT NULL,
        event_description TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS person (
        person_id SERIAL PRIMARY KEY,
        person_name TEXT NOT NULL,
        planner_id INTEGER REFERENCES planner(planner_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS organization (
        organization_id SERIAL PRIMARY KEY,
        organization_name TEXT NOT NULL,
        planner_id INTEGER REFERENCES planner(planner_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS plan (
        plan_id SERIAL PRIMARY KEY,
        event_id INTEGER NOT NULL REFERENCES event(event_id),
        planner_id INTEGER NOT NULL REFERENCES planner(planner_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS affiliation (
        affiliation_id SERIAL PRIMARY KEY,
        person_id INTEGER NOT NULL REFERENCES person(person_id),
        organization_id INTEGER NOT NULL REFERENCES organization(organization_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS participation (
        participation_id SERIAL PRIMARY KEY,
        event_id INTEGER NOT NULL REFERENCES event(event_id),
        person_id INTEGER NOT NULL REFERENCES person(person_id)
    )
    """,
]


def init_schema(cur) -> int:
    """Create all tables. Returns the number of statements run."""
    for statement in SCHEMA:
        cur.execute(statement)
    logger.info("Schema ready (%d tables)", len(SCHEMA))
    return len(SCHEMA)
