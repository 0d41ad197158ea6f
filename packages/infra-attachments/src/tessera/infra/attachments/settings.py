"""Attachment id codec configuration using Pydantic settings.

Settings are loaded from environment variables with the ``ATTACHMENT_ID_``
prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AttachmentIdSettings(BaseSettings):
    """Configuration for decoding serialized attachment ids.

    Environment Variables:
        ATTACHMENT_ID_ALLOW_LEGACY: Accept domain-less legacy ids on decode
            (default: true). Set to false once every stored id carries a
            domain.

    Example:
        >>> AttachmentIdSettings().allow_legacy
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="ATTACHMENT_ID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allow_legacy: bool = Field(
        default=True,
        description="Accept domain-less legacy attachment ids on decode",
    )


@lru_cache(maxsize=1)
def get_attachment_id_settings() -> AttachmentIdSettings:
    """Get cached attachment id settings singleton.

    Returns:
        AttachmentIdSettings instance loaded from environment.
    """
    return AttachmentIdSettings()
