"""Tessera Infra Attachments -- attachment id codec configuration."""

from __future__ import annotations

from tessera.infra.attachments.factory import create_attachment_id_parser
from tessera.infra.attachments.settings import (
    AttachmentIdSettings,
    get_attachment_id_settings,
)

__all__ = [
    "AttachmentIdSettings",
    "create_attachment_id_parser",
    "get_attachment_id_settings",
]
