"""Domain entity representing a styled span within a block's text."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from notekit.utils import as_index_range, as_int, as_mapping_list, as_str, as_url

logger = logging.getLogger(__name__)


class RangeKind(str, Enum):
    """Known kinds of ranges."""

    USER = "user"
    POST = "post"
    COMMENT = "comment"
    STAT = "stat"
    FOLLOW = "follow"
    BLOCKQUOTE = "blockquote"
    NOTICON = "noticon"
    SITE = "site"
    MATCH = "match"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "RangeKind":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class NotificationRange:
    """Sub-span of a block's text, optionally linking to a URL or comment.

    The payload carries a generic ``id`` whose meaning depends on the range
    type: it is the comment id for comment ranges, the post id for post ranges
    and the user id for user ranges.
    """

    kind: RangeKind
    url: str | None = None
    indices: tuple[int, int] | None = None
    comment_id: int | None = None
    post_id: int | None = None
    site_id: int | None = None
    user_id: int | None = None
    value: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "NotificationRange":
        """Build a range entity, degrading malformed fields to ``None``."""

        kind = RangeKind.parse(as_str(raw.get("type")))
        entity_id = as_int(raw.get("id"))
        post_id = as_int(raw.get("post_id"))
        return cls(
            kind=kind,
            url=as_url(raw.get("url")),
            indices=as_index_range(raw.get("indices")),
            comment_id=entity_id if kind is RangeKind.COMMENT else None,
            post_id=entity_id if kind is RangeKind.POST else post_id,
            site_id=as_int(raw.get("site_id")),
            user_id=entity_id if kind is RangeKind.USER else None,
            value=as_str(raw.get("value")),
        )


def ranges_from_list(raw: Any) -> tuple[NotificationRange, ...]:
    """Parse a list of range definitions, skipping items that are not mappings."""

    items = as_mapping_list(raw)
    if isinstance(raw, (list, tuple)) and len(items) != len(raw):
        logger.debug("Skipped %d malformed range entries", len(raw) - len(items))
    return tuple(NotificationRange.from_dict(item) for item in items)


__all__ = ["NotificationRange", "RangeKind", "ranges_from_list"]
