"""
Error taxonomy. Services raise these; api.errors turns them into structured JSON responses.
ValidationError enumerates failing fields; the others carry a message and a code.
"""
from typing import Any


class EduConnectError(Exception):
    """Base class for errors surfaced at the HTTP boundary."""

    status_code: int = 500
    code: str = "error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details:
            payload["details"] = self.details
        return payload


class FieldError(dict):
    """One failing field: {"field": ..., "message": ...}."""

    def __init__(self, field: str, message: str):
        super().__init__(field=field, message=message)


class ValidationError(EduConnectError):
    """Malformed or missing input; the caller can fix and resend."""

    status_code = 400
    code = "validation_error"

    def __init__(self, errors: list[FieldError], message: str = "Invalid request data"):
        self.errors = list(errors)
        super().__init__(message)

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([FieldError(field, message)], message=message)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["errors"] = [dict(e) for e in self.errors]
        return payload


class AuthenticationError(EduConnectError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    code = "unauthenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(EduConnectError):
    """Caller has no rights over the target entity."""

    status_code = 403
    code = "forbidden"


class NotFoundError(EduConnectError):
    """Referenced entity does not exist."""

    status_code = 404
    code = "not_found"

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found", {"id": str(entity_id)})


class ConstraintViolation(EduConnectError):
    """A storage uniqueness constraint rejected the write (e.g. duplicate enrollment)."""

    status_code = 409
    code = "conflict"


class UnexpectedError(EduConnectError):
    """Storage or connectivity failure. Safe for the caller to retry."""

    status_code = 500
    code = "unexpected_error"
