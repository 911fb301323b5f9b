"""Domain entity representing media attached to a notification block."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from notekit.utils import as_index_range, as_int, as_mapping_list, as_str, as_url

logger = logging.getLogger(__name__)


class MediaKind(str, Enum):
    """Known kinds of media."""

    IMAGE = "image"
    BADGE = "badge"
    AVATAR = "avatar"
    VIDEO = "video"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "MediaKind":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class NotificationMedia:
    """Image, badge or other asset referenced by a block."""

    kind: MediaKind
    url: str | None = None
    size: tuple[int, int] | None = None
    indices: tuple[int, int] | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "NotificationMedia":
        """Build a media entity, degrading malformed fields to ``None``."""

        width = as_int(raw.get("width"))
        height = as_int(raw.get("height"))
        size = (width, height) if width is not None and height is not None else None
        return cls(
            kind=MediaKind.parse(as_str(raw.get("type"))),
            url=as_url(raw.get("url")),
            size=size,
            indices=as_index_range(raw.get("indices")),
        )


def media_from_list(raw: Any) -> tuple[NotificationMedia, ...]:
    """Parse a list of media definitions, skipping items that are not mappings."""

    items = as_mapping_list(raw)
    if isinstance(raw, (list, tuple)) and len(items) != len(raw):
        logger.debug("Skipped %d malformed media entries", len(raw) - len(items))
    return tuple(NotificationMedia.from_dict(item) for item in items)


__all__ = ["MediaKind", "NotificationMedia", "media_from_list"]
