"""Error types raised by the data access layer and translated by the app."""


class PlannerError(Exception):
    """Base class for all planner_api errors."""
    status_code = 500


class NotFound(PlannerError):
    """No row matched the expected id."""
    status_code = 404

    def __init__(self, message="Not Found"):
        super().__init__(message)


class StoreError(PlannerError):
    """Wraps a failure from psycopg2 (constraint, connection, SQL)."""

    def __init__(self, original):
        super().__init__(str(original).strip())
        self.original = original


class MappingError(PlannerError):
    """A returned row could not be decoded into the expected record."""


class PoolError(PlannerError):
    """No connection could be checked out of the pool."""


class BadRequest(PlannerError):
    """Request body is not valid JSON or does not match the record shape."""
    status_code = 400
