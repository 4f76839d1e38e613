"""Application errors mapped to HTTP responses by the app factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Optional[Any] = None

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    """Request input is malformed."""

    def __init__(self, message: str = "Validation error", details: Optional[Any] = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class AuthenticationError(AppError):
    """No actor, or an actor the user store does not know."""

    def __init__(self, message: str = "Unauthorized", details: Optional[Any] = None) -> None:
        super().__init__(code="unauthorized", message=message, status_code=401, details=details)


class AuthorizationError(AppError):
    """Actor lacks the role required for the operation."""

    def __init__(self, message: str = "Forbidden", details: Optional[Any] = None) -> None:
        super().__init__(code="forbidden", message=message, status_code=403, details=details)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found", details: Optional[Any] = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict", details: Optional[Any] = None) -> None:
        super().__init__(code="conflict", message=message, status_code=409, details=details)
