"""Tessera Foundation Domain -- pure Python domain primitives.

This package provides the attachment identifier value object, its canonical
string codec, and the domain exception hierarchy raised by that codec.
"""

from tessera.foundation.domain.attachment_id import ATTACHMENT_PART_SEPARATOR, AttachmentId
from tessera.foundation.domain.exceptions import (
    EXPECTED_SHAPES,
    DomainError,
    InvalidComponentError,
    MalformedIdentifierError,
    MissingComponentError,
    MissingIdError,
    MissingInputError,
    ValidationError,
)

__all__ = [
    "ATTACHMENT_PART_SEPARATOR",
    "EXPECTED_SHAPES",
    "AttachmentId",
    "DomainError",
    "InvalidComponentError",
    "MalformedIdentifierError",
    "MissingComponentError",
    "MissingIdError",
    "MissingInputError",
    "ValidationError",
]
