"""Domain error taxonomy.

Services raise these; the global handlers in middleware.error_handler
turn them into JSON responses with the attached status code.
"""

from __future__ import annotations


class ChallengeAppError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(ChallengeAppError):
    """Malformed or missing input. Not retried."""

    status_code = 400
    default_detail = "Invalid request"


class NotFoundError(ChallengeAppError):
    """An identifier did not resolve to a stored entity."""

    status_code = 404
    default_detail = "Not found"

    def __init__(self, entity: str, identifier: object | None = None) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found")


class AlreadyMemberError(ChallengeAppError):
    """The user is already in the group's member set."""

    status_code = 409
    default_detail = "You are already a member of this group"


class PersistenceError(ChallengeAppError):
    """The store was unavailable or a write failed."""

    status_code = 500
    default_detail = "Storage failure"
