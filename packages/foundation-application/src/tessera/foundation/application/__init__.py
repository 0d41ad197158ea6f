"""Tessera Foundation Application -- application layer services."""

from tessera.foundation.application.attachment_ids import (
    AttachmentIdParser,
    AttachmentIdParseResult,
    RejectedAttachmentId,
)

__all__ = [
    "AttachmentIdParseResult",
    "AttachmentIdParser",
    "RejectedAttachmentId",
]
