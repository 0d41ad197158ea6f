"""Builds attachment id services from environment configuration."""

from __future__ import annotations

from tessera.foundation.application.attachment_ids import AttachmentIdParser
from tessera.infra.attachments.settings import (
    AttachmentIdSettings,
    get_attachment_id_settings,
)
from tessera.infra.observability.logging import get_logger


def create_attachment_id_parser(
    settings: AttachmentIdSettings | None = None,
) -> AttachmentIdParser:
    """Create an AttachmentIdParser configured from settings.

    Args:
        settings: Optional settings. Defaults to the cached environment
            settings from ``get_attachment_id_settings()``.

    Returns:
        A parser honouring the configured legacy id policy.
    """
    if settings is None:
        settings = get_attachment_id_settings()

    parser = AttachmentIdParser(allow_legacy=settings.allow_legacy)
    get_logger(__name__).info(
        "attachment_id_parser_created",
        allow_legacy=settings.allow_legacy,
    )
    return parser
