"""Domain exception hierarchy for attachment identifier handling.

This module provides the base exception hierarchy for all domain errors.
Exceptions include structured error codes and context for consistent
error reporting and logging by the layers that consume attachment ids.

Example:
    >>> from tessera.foundation.domain.exceptions import MalformedIdentifierError
    >>> raise MalformedIdentifierError("x/y/z")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "EXPECTED_SHAPES",
    "DomainError",
    "InvalidComponentError",
    "MalformedIdentifierError",
    "MissingComponentError",
    "MissingIdError",
    "MissingInputError",
    "ValidationError",
]

#: Accepted serialized shapes, reported back on malformed input.
EXPECTED_SHAPES: tuple[str, ...] = ("<domain>/<id>", "<id>")


class DomainError(Exception):
    """Base class for all domain errors.

    Provides error code and structured context for debugging. All domain
    exceptions inherit from this class to enable consistent error
    handling and logging.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (field names, raw input).

    Example:
        >>> raise DomainError("Operation failed", context={"attachment_id": "a/b"})
        DomainError: Operation failed (attachment_id=a/b)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ValidationError(DomainError):
    """Raised when input fails domain validation rules.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Field path that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("domain", "Must not be blank")
        ValidationError: Validation failed for 'domain': Must not be blank
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Field path that failed validation.
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class MissingInputError(ValidationError):
    """Raised when decoding is attempted without a serialized attachment id.

    Attributes:
        error_code: "MISSING_INPUT" (class constant).
    """

    error_code: str = "MISSING_INPUT"

    def __init__(self) -> None:
        super().__init__("attachment_id", "A serialized attachment id is required")


class MissingComponentError(ValidationError):
    """Raised when an attachment id component is absent (``None``).

    An empty string is a present component; only ``None`` is missing.

    Attributes:
        error_code: "MISSING_COMPONENT" (class constant).
        component: Name of the missing component ("domain" or "id").
    """

    error_code: str = "MISSING_COMPONENT"

    def __init__(self, component: str) -> None:
        """Initialize missing component error.

        Args:
            component: Name of the missing component.
        """
        self.component = component
        super().__init__(component, f"The attachment id {component} component is required")


class MissingIdError(MissingComponentError):
    """Raised when an attachment id is constructed without its id component.

    Attributes:
        error_code: "MISSING_ID" (class constant).
    """

    error_code: str = "MISSING_ID"

    def __init__(self) -> None:
        super().__init__("id")


class InvalidComponentError(ValidationError):
    """Raised when a component contains the reserved ``/`` separator.

    Attributes:
        error_code: "INVALID_COMPONENT" (class constant).
        component: Name of the offending component ("domain" or "id").
        value: The rejected component value.

    Example:
        >>> raise InvalidComponentError("domain", "a/b")
        InvalidComponentError: Validation failed for 'domain': An attachment id
        domain component cannot contain the '/' separator (..., value=a/b)
    """

    error_code: str = "INVALID_COMPONENT"

    def __init__(self, component: str, value: str, separator: str = "/") -> None:
        """Initialize invalid component error.

        Args:
            component: Name of the offending component.
            value: The rejected component value.
            separator: The reserved separator character.
        """
        self.component = component
        self.value = value
        reason = (
            f"An attachment id {component} component cannot contain "
            f"the '{separator}' separator"
        )
        super().__init__(component, reason, value=value)


class MalformedIdentifierError(ValidationError):
    """Raised when a serialized attachment id cannot be decoded.

    Attributes:
        error_code: "MALFORMED_IDENTIFIER" (class constant).
        serialized: The original input that failed to decode.
        expected_shapes: The accepted serialized shapes, as a hint.

    Example:
        >>> raise MalformedIdentifierError("x/y/z")
    """

    error_code: str = "MALFORMED_IDENTIFIER"

    def __init__(
        self,
        serialized: str,
        expected_shapes: tuple[str, ...] = EXPECTED_SHAPES,
    ) -> None:
        """Initialize malformed identifier error.

        Args:
            serialized: The undecodable input.
            expected_shapes: Accepted shapes reported back to the caller.
        """
        self.serialized = serialized
        self.expected_shapes = expected_shapes
        shapes = " or ".join(expected_shapes)
        reason = (
            f"Unable to deserialise the attachment id {serialized!r}. "
            f"The attachment id needs to look like {shapes}"
        )
        super().__init__(
            "attachment_id",
            reason,
            serialized=serialized,
            expected_shapes=shapes,
        )
