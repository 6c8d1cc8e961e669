"""Custom exceptions for the AssetTrack application."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Any


class ErrorCode(str, enum.Enum):
    """Closed set of error kinds surfaced to callers."""

    VALIDATION_ERROR = "validation_error"
    UNKNOWN_VALUE = "unknown_value"
    NOT_FOUND = "not_found"
    INVALID_TRANSITION = "invalid_transition"
    CONCURRENCY_TIMEOUT = "concurrency_timeout"
    PERSISTENCE_ERROR = "persistence_error"
    CONFIGURATION_ERROR = "configuration_error"
    AUTHENTICATION_ERROR = "authentication_error"


class AssetTrackException(Exception):
    """Base exception for AssetTrack application."""

    code: ErrorCode = ErrorCode.PERSISTENCE_ERROR
    retryable: bool = False

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.code.value,
            "detail": self.message,
            "details": self.details,
            "retryable": self.retryable,
        }


class ValidationError(AssetTrackException, ValueError):
    """Raised when request input fails validation."""

    code = ErrorCode.VALIDATION_ERROR


class UnknownValueError(ValidationError):
    """Raised when a status, action or condition is not a known member."""

    code = ErrorCode.UNKNOWN_VALUE

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Invalid {field}: {value}", field=field, value=str(value))
        self.field = field
        self.value = value


class NotFoundError(AssetTrackException):
    """Raised when a resource is not found."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(f"{resource} not found: {identifier}", resource=resource, identifier=str(identifier))
        self.resource = resource
        self.identifier = identifier


class InvalidTransitionError(AssetTrackException):
    """Raised when an action is not allowed from the asset's current status."""

    code = ErrorCode.INVALID_TRANSITION

    def __init__(self, current_status: Any, action: Any, allowed_actions: Iterable[Any]) -> None:
        self.current_status = current_status
        self.action = action
        self.allowed_actions = tuple(allowed_actions)
        allowed = [getattr(item, "value", item) for item in self.allowed_actions]
        status_value = getattr(current_status, "value", current_status)
        action_value = getattr(action, "value", action)
        super().__init__(
            f"Cannot perform '{action_value}' on asset with status '{status_value}'. "
            f"Available actions: {', '.join(allowed) if allowed else 'none'}",
            current_status=status_value,
            action=action_value,
            allowed_actions=allowed,
        )


class ConcurrencyTimeoutError(AssetTrackException):
    """Raised when the asset lock could not be acquired in bounded time."""

    code = ErrorCode.CONCURRENCY_TIMEOUT
    retryable = True


class PersistenceError(AssetTrackException):
    """Raised when a database operation fails."""

    code = ErrorCode.PERSISTENCE_ERROR
    retryable = True


class ConfigurationError(AssetTrackException):
    """Raised when configuration is invalid."""

    code = ErrorCode.CONFIGURATION_ERROR


class AuthenticationError(AssetTrackException):
    """Raised when no acting operator identity is supplied."""

    code = ErrorCode.AUTHENTICATION_ERROR
