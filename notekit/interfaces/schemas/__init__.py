"""Pydantic schemas exposed to the presentation layer."""

from .notification import BlockRead, MediaRead, NotificationRead, RangeRead

__all__ = ["BlockRead", "MediaRead", "NotificationRead", "RangeRead"]
