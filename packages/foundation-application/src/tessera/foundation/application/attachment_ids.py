"""Attachment id parsing service for record-oriented callers.

Decodes serialized attachment ids one at a time or in batches. Batch parsing
rejects individual bad records and keeps going, so a single malformed id
does not fail an import or a sync run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tessera.foundation.domain.attachment_id import AttachmentId
from tessera.foundation.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RejectedAttachmentId:
    """A serialized attachment id that failed to decode.

    Attributes:
        index: Position of the value in the parsed batch.
        value: The raw value as received.
        error: The validation error raised by the codec.
    """

    index: int
    value: str | None
    error: ValidationError


@dataclass(frozen=True)
class AttachmentIdParseResult:
    """Outcome of a batch parse.

    Attributes:
        parsed: Successfully decoded ids, in input order.
        rejected: Values that failed to decode, in input order.
    """

    parsed: tuple[AttachmentId, ...]
    rejected: tuple[RejectedAttachmentId, ...]

    @property
    def ok(self) -> bool:
        """True when no value was rejected."""
        return not self.rejected


class AttachmentIdParser:
    """Decodes serialized attachment ids with a configurable legacy policy.

    Args:
        allow_legacy: Accept domain-less legacy ids. Disable once all
            stored ids carry a domain.
    """

    def __init__(self, *, allow_legacy: bool = True) -> None:
        self._allow_legacy = allow_legacy

    @property
    def allow_legacy(self) -> bool:
        return self._allow_legacy

    def parse(self, value: str) -> AttachmentId:
        """Decode a single serialized attachment id.

        Args:
            value: Serialized attachment id.

        Returns:
            The decoded AttachmentId.

        Raises:
            MissingInputError: If value is None.
            MalformedIdentifierError: If value cannot be decoded, including
                legacy values when legacy ids are disabled.
        """
        attachment_id = AttachmentId.decode(value, allow_legacy=self._allow_legacy)
        if attachment_id.is_legacy:
            logger.debug("Decoded legacy attachment id: %s", value)
        return attachment_id

    def parse_many(self, values: Iterable[str | None]) -> AttachmentIdParseResult:
        """Decode a batch of serialized attachment ids.

        Each value that fails validation is recorded and logged; the
        remaining values are still decoded.

        Args:
            values: Serialized attachment ids.

        Returns:
            AttachmentIdParseResult with decoded and rejected values.
        """
        parsed: list[AttachmentId] = []
        rejected: list[RejectedAttachmentId] = []

        for index, value in enumerate(values):
            try:
                parsed.append(self.parse(value))  # type: ignore[arg-type]
            except ValidationError as exc:
                logger.warning(
                    "Rejected attachment id at index %d (%s): %s",
                    index,
                    exc.error_code,
                    exc.message,
                )
                rejected.append(RejectedAttachmentId(index=index, value=value, error=exc))

        if rejected:
            logger.info(
                "Parsed %d attachment ids, rejected %d",
                len(parsed),
                len(rejected),
            )
        return AttachmentIdParseResult(parsed=tuple(parsed), rejected=tuple(rejected))
