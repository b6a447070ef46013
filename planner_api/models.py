"""Record types for the planner tables and their JSON/row mapping.

Each dataclass mirrors one table: field names are the column names and the
wire names. Ids are assigned by the store, so every field defaults to None
and ``REQUIRED`` lists what a create payload must carry.
"""

from dataclasses import dataclass, asdict, fields
from typing import ClassVar

from .errors import BadRequest, MappingError


@dataclass
class Event:
    """An event someone can plan or attend."""
    TABLE: ClassVar[str] = "event"
    ID_FIELD: ClassVar[str] = "event_id"
    REQUIRED: ClassVar[tuple] = ("event_name", "event_location", "event_description")

    event_id: int | None = None
    event_name: str | None = None
    event_location: str | None = None
    event_description: str | None = None


@dataclass
class Person:
    TABLE: ClassVar[str] = "person"
    ID_FIELD: ClassVar[str] = "person_id"
    REQUIRED: ClassVar[tuple] = ("person_name",)

    person_id: int | None = None
    person_name: str | None = None
    planner_id: int | None = None


@dataclass
class Planner:
    """Ownership marker referenced by people, organizations and plans."""
    TABLE: ClassVar[str] = "planner"
    ID_FIELD: ClassVar[str] = "planner_id"
    REQUIRED: ClassVar[tuple] = ()

    planner_id: int | None = None


@dataclass
class Plan:
    """Links a planner to an event."""
    TABLE: ClassVar[str] = "plan"
    ID_FIELD: ClassVar[str] = "plan_id"
    REQUIRED: ClassVar[tuple] = ("event_id", "planner_id")

    plan_id: int | None = None
    event_id: int | None = None
    planner_id: int | None = None


@dataclass
class Organization:
    TABLE: ClassVar[str] = "organization"
    ID_FIELD: ClassVar[str] = "organization_id"
    REQUIRED: ClassVar[tuple] = ("organization_name",)

    organization_id: int | None = None
    organization_name: str | None = None
    planner_id: int | None = None


@dataclass
class Affiliation:
    """Person <-> organization membership."""
    TABLE: ClassVar[str] = "affiliation"
    ID_FIELD: ClassVar[str] = "affiliation_id"
    REQUIRED: ClassVar[tuple] = ("person_id", "organization_id")

    affiliation_id: int | None = None
    person_id: int | None = None
    organization_id: int | None = None


@dataclass
class Participation:
    """Person <-> event attendance."""
    TABLE: ClassVar[str] = "participation"
    ID_FIELD: ClassVar[str] = "participation_id"
    REQUIRED: ClassVar[tuple] = ("event_id", "person_id")

    participation_id: int | None = None
    event_id: int | None = None
    person_id: int | None = None


MODELS = (Event, Person, Planner, Plan, Organization, Affiliation, Participation)


def field_names(model) -> list[str]:
    return [f.name for f in fields(model)]


def table_fields(model, qualified=False) -> str:
    """Column list for a RETURNING/SELECT clause.

    ``qualified`` prefixes each column with the table name, for joins.
    """
    if qualified:
        return ", ".join(f"{model.TABLE}.{name}" for name in field_names(model))
    return ", ".join(field_names(model))


def record_id(record):
    return getattr(record, record.ID_FIELD)


def _is_id_field(name: str) -> bool:
    return name.endswith("_id")


def from_json(model, payload, required=None):
    """Decode a request payload into ``model``.

    ``required`` defaults to ``model.REQUIRED``. Id fields must be integers
    (or null when not required), the rest strings. Unknown keys are ignored.
    """
    if not isinstance(payload, dict):
        raise BadRequest(f"Expected a JSON object for {model.__name__}")
    if required is None:
        required = model.REQUIRED

    values = {}
    for name in field_names(model):
        value = payload.get(name)
        if value is None:
            if name in required:
                raise BadRequest(f"Missing field: {name}")
            continue
        if _is_id_field(name):
            if isinstance(value, bool) or not isinstance(value, int):
                raise BadRequest(f"Field {name} must be an integer")
        elif not isinstance(value, str):
            raise BadRequest(f"Field {name} must be a string")
        values[name] = value
    return model(**values)


def from_row(model, row):
    """Build ``model`` from a RealDictCursor row."""
    try:
        return model(**{name: row[name] for name in field_names(model)})
    except (KeyError, TypeError) as e:
        raise MappingError(f"Cannot map row to {model.__name__}: {e}") from e


def to_dict(record) -> dict:
    return asdict(record)
