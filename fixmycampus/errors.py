"""Errors raised by the service layer.

Each error carries the HTTP status it maps to; the application's exception
handlers turn them into ``{"error": message}`` JSON bodies.
"""


class CampusError(Exception):
    """Base class for errors that end a request with a JSON error body."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CampusError):
    """Malformed, missing or out-of-range input."""

    status_code = 400


class NotFoundError(CampusError):
    """A referenced issue, comment or solution does not exist."""

    status_code = 404


class StoreError(CampusError):
    """The database failed. The message is safe to show to callers."""

    status_code = 500
