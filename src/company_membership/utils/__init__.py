"""Utility helpers for company-membership."""

from datetime import datetime, timezone

from .uuid import generate_uuid_v7


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


__all__ = ["generate_uuid_v7", "utc_now"]
