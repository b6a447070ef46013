"""
Planner database CRUD operations.

Every function takes a cursor from ``get_cursor(pool)`` and runs one
parameterized statement. Creates and updates return the stored record via
RETURNING; deletes return the number of affected rows. Only column lists
are templated into the SQL, and those come from the record classes.
"""

import logging

from ..errors import NotFound
from ..models import (
    Affiliation,
    Event,
    Organization,
    Participation,
    Person,
    Plan,
    Planner,
    from_row,
    record_id,
    table_fields,
)

logger = logging.getLogger(__name__)


def _fetch_one(cur, model):
    row = cur.fetchone()
    if row is None:
        raise NotFound()
    return from_row(model, row)


def _delete(cur, model, record) -> int:
    cur.execute(
        f"DELETE FROM {model.TABLE} WHERE {model.ID_FIELD} = %s",
        (record_id(record),),
    )
    logger.info("Deleted %d %s row(s) for id %s", cur.rowcount, model.TABLE, record_id(record))
    return cur.rowcount


# --- Events ---

def create_event(cur, event: Event) -> Event:
    cur.execute(f"""
        INSERT INTO event (event_name, event_location, event_description)
        VALUES (%s, %s, %s)
        RETURNING {table_fields(Event)}
    """, (event.event_name, event.event_location, event.event_description))
    created = _fetch_one(cur, Event)
    logger.info("Created event %s", created.event_id)
    return created


def modify_event(cur, event: Event) -> Event:
    """Update name, location and description of an existing event."""
    if event.event_id is None:
        raise NotFound()
    cur.execute(f"""
        UPDATE event
        SET event_name = %s, event_location = %s, event_description = %s
        WHERE event_id = %s
        RETURNING {table_fields(Event)}
    """, (event.event_name, event.event_location, event.event_description, event.event_id))
    return _fetch_one(cur, Event)


def get_event(cur, event_id: int) -> Event:
    cur.execute(f"""
        SELECT {table_fields(Event)} FROM event WHERE event_id = %s
    """, (event_id,))
    return _fetch_one(cur, Event)


def get_events(cur, person: Person) -> list[Event]:
    """Events reachable from a person through person -> planner -> plan -> event."""
    cur.execute(f"""
        SELECT {table_fields(Event, qualified=True)}
        FROM event
        JOIN plan ON event.event_id = plan.event_id
        JOIN planner ON plan.planner_id = planner.planner_id
        JOIN person ON planner.planner_id = person.planner_id
        WHERE person.person_id = %s
        ORDER BY event.event_id
    """, (person.person_id,))
    return [from_row(Event, row) for row in cur.fetchall()]


def delete_event(cur, event: Event) -> int:
    return _delete(cur, Event, event)


# --- Plans ---

def create_plan(cur, plan: Plan) -> Plan:
    cur.execute(f"""
        INSERT INTO plan (planner_id, event_id)
        VALUES (%s, %s)
        RETURNING {table_fields(Plan)}
    """, (plan.planner_id, plan.event_id))
    created = _fetch_one(cur, Plan)
    logger.info("Created plan %s (planner %s -> event %s)",
                created.plan_id, created.planner_id, created.event_id)
    return created


def delete_plan(cur, plan: Plan) -> int:
    return _delete(cur, Plan, plan)


# --- Planners ---

def create_planner(cur) -> Planner:
    cur.execute(f"""
        INSERT INTO planner DEFAULT VALUES
        RETURNING {table_fields(Planner)}
    """)
    created = _fetch_one(cur, Planner)
    logger.info("Created planner %s", created.planner_id)
    return created


def delete_planner(cur, planner: Planner) -> int:
    return _delete(cur, Planner, planner)


# --- People ---

def create_person(cur, person: Person) -> Person:
    cur.execute(f"""
        INSERT INTO person (person_name, planner_id)
        VALUES (%s, %s)
        RETURNING {table_fields(Person)}
    """, (person.person_name, person.planner_id))
    created = _fetch_one(cur, Person)
    logger.info("Created person %s", created.person_id)
    return created


def create_person_with_planner(cur, person: Person) -> Person:
    """Create a person, first creating a planner for them if none is given.

    Both inserts run on ``cur``, so they share the caller's transaction.
    """
    if person.planner_id is None:
        person.planner_id = create_planner(cur).planner_id
    return create_person(cur, person)


def modify_person(cur, person: Person) -> Person:
    if person.person_id is None:
        raise NotFound()
    cur.execute(f"""
        UPDATE person SET person_name = %s
        WHERE person_id = %s
        RETURNING {table_fields(Person)}
    """, (person.person_name, person.person_id))
    return _fetch_one(cur, Person)


def get_person(cur, person_id: int) -> Person:
    cur.execute(f"""
        SELECT {table_fields(Person)} FROM person WHERE person_id = %s
    """, (person_id,))
    return _fetch_one(cur, Person)


def delete_person(cur, person: Person) -> int:
    return _delete(cur, Person, person)


# --- Affiliations ---

def create_affiliation(cur, affiliation: Affiliation) -> Affiliation:
    cur.execute(f"""
        INSERT INTO affiliation (person_id, organization_id)
        VALUES (%s, %s)
        RETURNING {table_fields(Affiliation)}
    """, (affiliation.person_id, affiliation.organization_id))
    return _fetch_one(cur, Affiliation)


def delete_affiliation(cur, affiliation: Affiliation) -> int:
    return _delete(cur, Affiliation, affiliation)


# --- Organizations ---

def create_organization(cur, organization: Organization) -> Organization:
    cur.execute(f"""
        INSERT INTO organization (organization_name, planner_id)
        VALUES (%s, %s)
        RETURNING {table_fields(Organization)}
    """, (organization.organization_name, organization.planner_id))
    created = _fetch_one(cur, Organization)
    logger.info("Created organization %s", created.organization_id)
    return created


def create_organization_with_planner(cur, organization: Organization) -> Organization:
    """Same as create_person_with_planner, for organizations."""
    if organization.planner_id is None:
        organization.planner_id = create_planner(cur).planner_id
    return create_organization(cur, organization)


def get_organization(cur, organization_id: int) -> Organization:
    cur.execute(f"""
        SELECT {table_fields(Organization)} FROM organization WHERE organization_id = %s
    """, (organization_id,))
    return _fetch_one(cur, Organization)


def delete_organization(cur, organization: Organization) -> int:
    return _delete(cur, Organization, organization)


# --- Participations ---

def create_participation(cur, participation: Participation) -> Participation:
    cur.execute(f"""
        INSERT INTO participation (event_id, person_id)
        VALUES (%s, %s)
        RETURNING {table_fields(Participation)}
    """, (participation.event_id, participation.person_id))
    return _fetch_one(cur, Participation)


def delete_participation(cur, participation: Participation) -> int:
    return _delete(cur, Participation, participation)
