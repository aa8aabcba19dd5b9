"""
Domain Exceptions

These exceptions represent business rule violations and domain-specific errors.
Each one carries the HTTP status the API layer answers with; domain and
application code only raise them.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    status_code: int = 400

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_TRANSITION")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when input or entity validation fails.

    Use for malformed or missing input and unresolvable references.
    """

    status_code = 400

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class AuthorizationException(DomainException):
    """Raised when a user is not authorized to perform an operation."""

    status_code = 403

    def __init__(self, operation: str, resource: str | None = None, user_id: str | None = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        msg = f"Not authorized to perform '{operation}'"
        if resource:
            msg += f" on '{resource}'"
        super().__init__(
            msg,
            "AUTHORIZATION_ERROR",
            {
                "operation": operation,
                "resource": resource,
            },
        )


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""

    status_code = 404

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    status_code = 409

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class InvalidTransitionException(InvalidOperationException):
    """Raised when a status change is not a legal transition."""

    def __init__(self, current_state: str, target_state: str):
        self.target_state = target_state
        super().__init__(
            "change_status",
            current_state,
            f"Cannot transition from '{current_state}' to '{target_state}'",
        )
        self.code = "INVALID_TRANSITION"
        self.details["target_state"] = target_state


class DuplicateEntityException(DomainException):
    """Raised when attempting to create a duplicate entity."""

    status_code = 409

    def __init__(self, entity_type: str, field: str, value: Any):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            f"{entity_type} with {field}='{value}' already exists",
            "DUPLICATE_ENTITY",
            {
                "entity_type": entity_type,
                "field": field,
                "value": str(value),
            },
        )


class ConcurrencyException(DomainException):
    """Raised when a conditional write lost against a concurrent change."""

    status_code = 409

    def __init__(self, entity_type: str, entity_id: Any, expected_state: str, actual_state: str | None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected_state = expected_state
        self.actual_state = actual_state
        super().__init__(
            f"Concurrency conflict for {entity_type} {entity_id}. "
            f"Expected state '{expected_state}', but found '{actual_state}'",
            "CONCURRENCY_CONFLICT",
            {
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "expected_state": expected_state,
                "actual_state": actual_state,
            },
        )


class AggregationException(DomainException):
    """Raised when statistics cannot be computed from the underlying collections."""

    status_code = 500

    def __init__(self, source: str, original_error: Exception | None = None):
        self.source = source
        self.original_error = original_error
        details: dict[str, Any] = {"source": source}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(f"Failed to aggregate statistics from {source}", "AGGREGATION_ERROR", details)
