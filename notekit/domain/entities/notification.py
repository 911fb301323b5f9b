"""Domain entity representing a notification and its blocks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from notekit.utils import as_flag, as_int, as_mapping, as_str, as_url

from .block import BlockKind, NotificationBlock, blocks_from_list
from .meta import BlockMeta

logger = logging.getLogger(__name__)

OverrideListener = Callable[["Notification"], None]


def _parse_timestamp(value: Any) -> datetime | None:
    text = as_str(value)
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Ignoring malformed notification timestamp %r", text)
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _block_payloads(value: Any) -> list[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


@dataclass(eq=False)
class Notification:
    """Container owning the subject, header and body blocks of a notification.

    Blocks keep a plain reference back to their notification and call
    :meth:`did_change_overrides` whenever one of their local overrides changes.
    Notifications compare by identity.
    """

    id: int | None = None
    note_type: str | None = None
    read: bool = False
    timestamp: datetime | None = None
    url: str | None = None
    icon: str | None = None
    noticon: str | None = None
    meta: BlockMeta = field(default_factory=BlockMeta)
    subject: list[NotificationBlock] = field(default_factory=list)
    header: list[NotificationBlock] = field(default_factory=list)
    body: list[NotificationBlock] = field(default_factory=list)
    override_revision: int = field(default=0, init=False)
    _listeners: list[OverrideListener] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_dict(cls, payload: Any) -> "Notification":
        """Build a notification and its blocks from a raw payload. Never raises."""

        raw = as_mapping(payload) or {}
        notification = cls(
            id=as_int(raw.get("id")),
            note_type=as_str(raw.get("type")),
            read=bool(as_flag(raw.get("read"))),
            timestamp=_parse_timestamp(raw.get("timestamp")),
            url=as_url(raw.get("url")),
            icon=as_url(raw.get("icon")),
            noticon=as_str(raw.get("noticon")),
            meta=BlockMeta.from_dict(raw.get("meta")),
        )
        notification.subject = blocks_from_list(_block_payloads(raw.get("subject")), notification)
        notification.header = blocks_from_list(_block_payloads(raw.get("header")), notification)
        notification.body = blocks_from_list(_block_payloads(raw.get("body")), notification)
        return notification

    @property
    def meta_comment_id(self) -> int | None:
        return self.meta.ids.comment

    @property
    def blocks(self) -> list[NotificationBlock]:
        """Return every block in subject, header, body order."""

        return [*self.subject, *self.header, *self.body]

    def blocks_of_kind(self, kind: BlockKind) -> list[NotificationBlock]:
        return [block for block in self.body if block.kind is kind]

    def add_override_listener(self, listener: OverrideListener) -> None:
        self._listeners.append(listener)

    def remove_override_listener(self, listener: OverrideListener) -> None:
        """Unregister ``listener``; unknown listeners are ignored."""

        if listener in self._listeners:
            self._listeners.remove(listener)

    def did_change_overrides(self) -> None:
        """Record an override change on one of the blocks and notify listeners.

        A failing listener is logged and skipped; the remaining listeners are
        still notified and the block mutation that triggered the call succeeds.
        """

        self.override_revision += 1
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception(
                    "Override listener %r failed for notification %s", listener, self.id
                )


__all__ = ["Notification", "OverrideListener"]
