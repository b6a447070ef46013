"""Planner API - HTTP handlers.

One view per route: decode the JSON body, check a cursor out of the pool,
run one data access call and encode the result. Deletes answer with the
status derived from the affected-row count.
"""

import logging

from flask import Blueprint, Flask, current_app, jsonify, request

from .config import Settings
from .database import planner_db
from .database.connection import create_pool, get_cursor
from .errors import BadRequest, MappingError, NotFound, PlannerError, PoolError, StoreError
from .models import (
    Affiliation,
    Event,
    Organization,
    Person,
    Plan,
    Planner,
    from_json,
    to_dict,
)

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__)


def _pool():
    return current_app.extensions["db_pool"]


def _body():
    data = request.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    return data


def _decode(model, required=None):
    return from_json(model, _body(), required=required)


def _decode_for_delete(model):
    return _decode(model, required=(model.ID_FIELD,))


def _deleted_response(count):
    if count == 0:
        return "", 404
    if count == 1:
        return "", 200
    logger.error("Delete affected %d rows, expected at most one", count)
    return "", 500


@api.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "healthy"})


# --- Events ---

@api.route("/events", methods=["POST"])
def create_event():
    event = _decode(Event)
    with get_cursor(_pool()) as cur:
        created = planner_db.create_event(cur, event)
    return jsonify(to_dict(created))


@api.route("/events", methods=["PATCH"])
def modify_event():
    event = _decode(Event, required=Event.REQUIRED + (Event.ID_FIELD,))
    with get_cursor(_pool()) as cur:
        modified = planner_db.modify_event(cur, event)
    return jsonify(to_dict(modified))


@api.route("/events", methods=["GET"])
def get_events():
    """Events of the person given in the body."""
    person = _decode(Person, required=(Person.ID_FIELD,))
    with get_cursor(_pool()) as cur:
        events = planner_db.get_events(cur, person)
    return jsonify([to_dict(e) for e in events])


@api.route("/events/<int:event_id>", methods=["GET"])
def get_event(event_id):
    with get_cursor(_pool()) as cur:
        event = planner_db.get_event(cur, event_id)
    return jsonify(to_dict(event))


@api.route("/users/<int:person_id>/events", methods=["GET"])
def get_person_events(person_id):
    with get_cursor(_pool()) as cur:
        events = planner_db.get_events(cur, Person(person_id=person_id))
    return jsonify([to_dict(e) for e in events])


@api.route("/events", methods=["DELETE"])
def delete_event():
    event = _decode_for_delete(Event)
    with get_cursor(_pool()) as cur:
        count = planner_db.delete_event(cur, event)
    return _deleted_response(count)


# --- Plans ---

@api.route("/plans", methods=["POST"])
def create_plan():
    plan = _decode(Plan)
    with get_cursor(_pool()) as cur:
        created = planner_db.create_plan(cur, plan)
    return jsonify(to_dict(created))


@api.route("/plans", methods=["DELETE"])
def delete_plan():
    plan = _decode_for_delete(Plan)
    with get_cursor(_pool()) as cur:
        count = planner_db.delete_plan(cur, plan)
    return _deleted_response(count)


# --- Planners ---

@api.route("/planner", methods=["POST"])
def create_planner():
    with get_cursor(_pool()) as cur:
        created = planner_db.create_planner(cur)
    return jsonify(to_dict(created))


@api.route("/planner", methods=["DELETE"])
def delete_planner():
    planner = _decode_for_delete(Planner)
    with get_cursor(_pool()) as cur:
        count = planner_db.delete_planner(cur, planner)
    return _deleted_response(count)


# --- People ---

@api.route("/users", methods=["POST"])
def create_person():
    """Create a person together with the planner they own."""
    person = _decode(Person)
    with get_cursor(_pool()) as cur:
        created = planner_db.create_person_with_planner(cur, person)
    return jsonify(to_dict(created))


@api.route("/users", methods=["PATCH"])
def modify_person():
    person = _decode(Person, required=Person.REQUIRED + (Person.ID_FIELD,))
    with get_cursor(_pool()) as cur:
        modified = planner_db.modify_person(cur, person)
    return jsonify(to_dict(modified))


@api.route("/users/<int:person_id>", methods=["GET"])
def get_person(person_id):
    with get_cursor(_pool()) as cur:
        person = planner_db.get_person(cur, person_id)
    return jsonify(to_dict(person))


@api.route("/users", methods=["DELETE"])
def delete_person():
    person = _decode_for_delete(Person)
    with get_cursor(_pool()) as cur:
        count = planner_db.delete_person(cur, person)
    return _deleted_response(count)


# --- Affiliations ---

@api.route("/affiliations", methods=["POST"])
def create_affiliation():
    affiliation = _decode(Affiliation)
    with get_cursor(_pool()) as cur:
        created = planner_db.create_affiliation(cur, affiliation)
    return jsonify(to_dict(created))


@api.route("/affiliations", methods=["DELETE"])
def delete_affiliation():
    affiliation = _decode_for_delete(Affiliation)
    with get_cursor(_pool()) as cur:
        count = planner_db.delete_affiliation(cur, affiliation)
    return _deleted_response(count)


# --- Organizations ---

@api.route("/organizations", methods=["POST"])
def create_organization():
    organization = _decode(Organization)
    with get_cursor(_pool()) as cur:
        created = planner_db.create_organization_with_planner(cur, organization)
    return jsonify(to_dict(created))


@api.route("/organizations/<int:organization_id>", methods=["GET"])
def get_organization(organization_id):
    with get_cursor(_pool()) as cur:
        organization = planner_db.get_organization(cur, organization_id)
    return jsonify(to_dict(organization))


@api.route("/organizations", methods=["DELETE"])
def delete_organization():
    organization = _decode_for_delete(Organization)
    with get_cursor(_pool()) as cur:
        count = planner_db.delete_organization(cur, organization)
    return _deleted_response(count)


# --- Errors ---

def handle_planner_error(error):
    if isinstance(error, NotFound):
        logger.info("%s %s: not found", request.method, request.path)
        return "", 404
    if isinstance(error, BadRequest):
        logger.warning("%s %s: %s", request.method, request.path, error)
        return jsonify({"error": str(error)}), 400
    logger.error("%s %s failed: %s: %s", request.method, request.path,
                 type(error).__name__, error)
    if isinstance(error, (StoreError, PoolError)):
        return str(error), 500
    if isinstance(error, MappingError):
        return "", 500
    return "", error.status_code


def create_app(settings=None, pool=None):
    """Build the Flask app around a connection pool.

    ``pool`` is used as given; otherwise one is opened from ``settings``
    (or from the environment when no settings are passed).
    """
    app = Flask(__name__)
    if pool is None:
        if settings is None:
            settings = Settings.from_env()
        pool = create_pool(settings)
    app.extensions["db_pool"] = pool
    app.register_blueprint(api)
    app.register_error_handler(PlannerError, handle_planner_error)
    return app
