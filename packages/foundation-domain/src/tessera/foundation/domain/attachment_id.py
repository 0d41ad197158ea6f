"""Attachment identifier value object and its canonical string codec.

An attachment is identified by a tuple of a service provider domain and an
identifying token unique to that provider. The canonical form is
``<domain>/<id>``, or the bare ``<id>`` for legacy identifiers minted before
the domain component existed.

Example:
    >>> from tessera.foundation.domain import AttachmentId
    >>> AttachmentId("example.com", "doc123").encode()
    'example.com/doc123'
    >>> AttachmentId.decode("legacyToken")
    AttachmentId(domain='', id='legacyToken')
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from tessera.foundation.domain.exceptions import (
    InvalidComponentError,
    MalformedIdentifierError,
    MissingComponentError,
    MissingIdError,
    MissingInputError,
)

#: Separates the domain from the id in a serialized attachment id.
ATTACHMENT_PART_SEPARATOR = "/"


@dataclass(frozen=True, slots=True, order=True)
class AttachmentId:
    """Attachment identity as a ``(domain, id)`` pair.

    Equality, hashing and ordering are defined on the pair: ids compare by
    domain first, then by id. For any two attachment ids,
    ``a.encode() == b.encode()`` iff ``a == b``.

    Attributes:
        domain: Provider domain. Empty only for legacy identifiers.
        id: Provider-local token.

    Raises:
        MissingIdError: If id is None.
        MissingComponentError: If domain is None.
        InvalidComponentError: If either component contains ``/``.
    """

    domain: str
    id: str
    _serialized: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.id is None:
            raise MissingIdError()
        if self.domain is None:
            raise MissingComponentError("domain")
        if ATTACHMENT_PART_SEPARATOR in self.domain:
            raise InvalidComponentError("domain", self.domain, ATTACHMENT_PART_SEPARATOR)
        if ATTACHMENT_PART_SEPARATOR in self.id:
            raise InvalidComponentError("id", self.id, ATTACHMENT_PART_SEPARATOR)

        # Store plain str values; str subclasses (StrEnum members) cannot be interned.
        object.__setattr__(self, "domain", sys.intern(str.__str__(self.domain)))
        object.__setattr__(self, "id", str.__str__(self.id))
        # TODO: drop the domain-less form once legacy ids are migrated.
        if self.domain:
            serialized = f"{self.domain}{ATTACHMENT_PART_SEPARATOR}{self.id}"
        else:
            serialized = self.id
        object.__setattr__(self, "_serialized", serialized)

    @classmethod
    def decode(cls, serialized: str, *, allow_legacy: bool = True) -> AttachmentId:
        """Create an AttachmentId from its serialized form.

        Args:
            serialized: ``<domain>/<id>`` or, for legacy ids, ``<id>``.
                A leading separator (``/<id>``) also yields a legacy id.
            allow_legacy: Accept the domain-less legacy form.

        Returns:
            The decoded AttachmentId.

        Raises:
            MissingInputError: If serialized is None.
            MalformedIdentifierError: If serialized is empty, has no
                non-empty part, or contains more than one separator.
        """
        if serialized is None:
            raise MissingInputError()
        parts = serialized.split(ATTACHMENT_PART_SEPARATOR)

        # Two part ids are the expected case (domain/id).
        if len(parts) == 2 and any(parts):
            return cls(parts[0], parts[1])

        # One part ids are legacy ids (pre-migration).
        if len(parts) == 1 and parts[0] and allow_legacy:
            return cls("", parts[0])

        raise MalformedIdentifierError(serialized)

    def encode(self) -> str:
        """Return the canonical serialized form."""
        return self._serialized

    @property
    def is_legacy(self) -> bool:
        """True for domain-less identifiers."""
        return not self.domain

    def compare_to(self, other: AttachmentId) -> int:
        """Three-way comparison: negative, zero, or positive.

        Orders by domain, then by id.
        """
        if self == other:
            return 0
        return -1 if self < other else 1

    def __str__(self) -> str:
        """Return the canonical form for serialization."""
        return self._serialized
