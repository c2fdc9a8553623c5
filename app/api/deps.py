"""Shared endpoint dependencies."""

from fastapi import Query

from app.core.config import get_settings
from app.core.enums import Language


def get_language(
    language: Language | None = Query(None, description="Language for messages and labels (es/en)"),
) -> Language:
    """Requested language, falling back to the configured default."""
    return language or get_settings().default_language
