"""Domain entity representing one block of a notification body."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from notekit.config import get_effective_settings
from notekit.utils import as_flag, as_mapping, as_str

from .media import MediaKind, NotificationMedia, media_from_list
from .meta import BlockMeta
from .range import NotificationRange, ranges_from_list

if TYPE_CHECKING:
    from .notification import Notification

logger = logging.getLogger(__name__)

KEY_ACTIONS = "actions"
KEY_MEDIA = "media"
KEY_META = "meta"
KEY_RANGES = "ranges"
KEY_TYPE = "type"
KEY_TEXT = "text"

USER_BLOCK_TYPE = "user"


class BlockKind(str, Enum):
    """Known kinds of blocks. ``IMAGE`` covers both images and badges."""

    TEXT = "text"
    IMAGE = "image"
    USER = "user"
    COMMENT = "comment"


class BlockAction(str, Enum):
    """Actions a user may toggle on a block, keyed by their payload name."""

    APPROVE = "approve-comment"
    FOLLOW = "follow"
    LIKE = "like-comment"
    REPLY = "replyto-comment"
    SPAM = "spam-comment"
    TRASH = "trash-comment"


@dataclass(eq=False)
class NotificationBlock:
    """Structured unit of a notification: text, media and actionable state.

    ``media`` and ``ranges`` are fixed at construction. The text override and
    the action overrides are local, ephemeral values used while a remote call is
    in flight; every write to them is reported to the parent notification.
    """

    text: str | None = None
    raw_type: str | None = None
    media: tuple[NotificationMedia, ...] = ()
    ranges: tuple[NotificationRange, ...] = ()
    actions: Mapping[str, Any] | None = None
    meta: BlockMeta = field(default_factory=BlockMeta)
    parent: Notification | None = field(default=None, repr=False)
    _text_override: str | None = field(default=None, init=False, repr=False)
    _actions_override: dict[BlockAction, bool] = field(
        default_factory=dict, init=False, repr=False
    )
    _attributes_cache: dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_dict(cls, payload: Any, parent: Notification | None = None) -> "NotificationBlock":
        """Build a block from a raw payload. Never raises."""

        raw = as_mapping(payload)
        if raw is None:
            logger.debug("Block payload is not a mapping: %r", type(payload).__name__)
            raw = {}

        actions = as_mapping(raw.get(KEY_ACTIONS))
        return cls(
            text=as_str(raw.get(KEY_TEXT)),
            raw_type=as_str(raw.get(KEY_TYPE)),
            media=media_from_list(raw.get(KEY_MEDIA)),
            ranges=ranges_from_list(raw.get(KEY_RANGES)),
            actions=dict(actions) if actions is not None else None,
            meta=BlockMeta.from_dict(raw.get(KEY_META)),
            parent=parent,
        )

    # Classification

    @property
    def kind(self) -> BlockKind:
        """Return the block kind; the most specific signal wins."""

        if self.raw_type == USER_BLOCK_TYPE:
            return BlockKind.USER

        comment_id = self.meta_comment_id
        parent_comment_id = self.parent.meta_comment_id if self.parent is not None else None
        if (
            comment_id is not None
            and parent_comment_id is not None
            and self.meta_site_id is not None
            and comment_id == parent_comment_id
        ):
            return BlockKind.COMMENT

        if self.media and self.media[0].kind in (MediaKind.IMAGE, MediaKind.BADGE):
            return BlockKind.IMAGE

        return BlockKind.TEXT

    # Derived properties

    @property
    def text_override(self) -> str | None:
        return self._text_override

    @text_override.setter
    def text_override(self, value: str | None) -> None:
        self._text_override = value
        self._notify_parent()

    @property
    def effective_text(self) -> str | None:
        """Return the text override when set, the payload text otherwise."""

        return self._text_override if self._text_override is not None else self.text

    @property
    def image_urls(self) -> list[str]:
        return [
            media.url
            for media in self.media
            if media.kind is MediaKind.IMAGE and media.url is not None
        ]

    @property
    def is_comment_approved(self) -> bool:
        """Return ``True`` when the comment is approved or cannot be moderated."""

        return self.is_action_on(BlockAction.APPROVE) or not self.is_action_enabled(
            BlockAction.APPROVE
        )

    @property
    def meta_comment_id(self) -> int | None:
        return self.meta.ids.comment

    @property
    def meta_site_id(self) -> int | None:
        return self.meta.ids.site

    @property
    def meta_links_home(self) -> str | None:
        return self.meta.links.home

    @property
    def meta_titles_home(self) -> str | None:
        return self.meta.titles.home

    # Actions

    def set_override(self, action: BlockAction, value: bool) -> None:
        """Shadow the server value of ``action`` until the override is removed."""

        self._actions_override[action] = value
        self._notify_parent()

    def remove_override(self, action: BlockAction) -> None:
        """Drop the local override for ``action``, if any."""

        removed = self._actions_override.pop(action, None) is not None
        if removed or get_effective_settings().notify_on_redundant_override_removal:
            self._notify_parent()

    def is_action_enabled(self, action: BlockAction) -> bool:
        return self._value_for_action(action) is not None

    def is_action_on(self, action: BlockAction) -> bool:
        """Return ``True`` when ``action`` is toggled on (e.g. the comment is liked)."""

        return bool(self._value_for_action(action))

    def available_actions(self) -> list[BlockAction]:
        """Return the enabled actions in declaration order."""

        return [action for action in BlockAction if self.is_action_enabled(action)]

    def _value_for_action(self, action: BlockAction) -> bool | None:
        if action in self._actions_override:
            return self._actions_override[action]
        if self.actions is None:
            return None
        return as_flag(self.actions.get(action.value))

    # Attribute cache

    def cached_value(self, key: str) -> Any:
        return self._attributes_cache.get(key)

    def set_cached_value(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``; ``None`` evicts the entry."""

        if value is None:
            self._attributes_cache.pop(key, None)
            return
        self._attributes_cache[key] = value

    # Range lookup

    def range_with_url(self, url: str) -> NotificationRange | None:
        for notification_range in self.ranges:
            if notification_range.url is not None and notification_range.url == url:
                return notification_range
        return None

    def range_with_comment_id(self, comment_id: int) -> NotificationRange | None:
        for notification_range in self.ranges:
            if (
                notification_range.comment_id is not None
                and notification_range.comment_id == comment_id
            ):
                return notification_range
        return None

    def _notify_parent(self) -> None:
        if self.parent is not None:
            self.parent.did_change_overrides()

    def __eq__(self, other: object) -> bool:
        # Range and media contents and action state are not compared.
        if not isinstance(other, NotificationBlock):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.text == other.text
            and self.parent == other.parent
            and len(self.ranges) == len(other.ranges)
            and len(self.media) == len(other.media)
        )

    __hash__ = None  # type: ignore[assignment]


def blocks_from_list(
    payloads: Iterable[Any], parent: Notification | None = None
) -> list[NotificationBlock]:
    """Parse block payloads in order, one block per payload."""

    return [NotificationBlock.from_dict(payload, parent) for payload in payloads]


__all__ = ["BlockAction", "BlockKind", "NotificationBlock", "blocks_from_list"]
