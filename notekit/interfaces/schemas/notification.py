"""Pydantic models describing parsed notifications for the presentation layer."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from notekit.domain.entities import (
    BlockKind,
    MediaKind,
    Notification,
    NotificationBlock,
    NotificationMedia,
    NotificationRange,
    RangeKind,
)


class MediaRead(BaseModel):
    """Representation of a media item attached to a block."""

    kind: MediaKind
    url: str | None = None
    size: tuple[int, int] | None = None
    indices: tuple[int, int] | None = None

    @classmethod
    def from_entity(cls, media: NotificationMedia) -> "MediaRead":
        return cls(kind=media.kind, url=media.url, size=media.size, indices=media.indices)


class RangeRead(BaseModel):
    """Representation of a styled range within a block's text."""

    kind: RangeKind
    url: str | None = None
    indices: tuple[int, int] | None = None
    comment_id: int | None = None
    post_id: int | None = None
    site_id: int | None = None
    user_id: int | None = None
    value: str | None = None

    @classmethod
    def from_entity(cls, notification_range: NotificationRange) -> "RangeRead":
        return cls(
            kind=notification_range.kind,
            url=notification_range.url,
            indices=notification_range.indices,
            comment_id=notification_range.comment_id,
            post_id=notification_range.post_id,
            site_id=notification_range.site_id,
            user_id=notification_range.user_id,
            value=notification_range.value,
        )


class BlockRead(BaseModel):
    """Snapshot of a block including the effect of local overrides."""

    kind: BlockKind
    text: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    media: list[MediaRead] = Field(default_factory=list)
    ranges: list[RangeRead] = Field(default_factory=list)
    actions: dict[str, bool] = Field(
        default_factory=dict, description="Effective value of every available action"
    )
    is_comment_approved: bool
    meta_comment_id: int | None = None
    meta_site_id: int | None = None
    meta_links_home: str | None = None
    meta_titles_home: str | None = None

    @classmethod
    def from_entity(cls, block: NotificationBlock) -> "BlockRead":
        """Return the snapshot of ``block`` as currently displayed."""

        return cls(
            kind=block.kind,
            text=block.effective_text,
            image_urls=block.image_urls,
            media=[MediaRead.from_entity(media) for media in block.media],
            ranges=[RangeRead.from_entity(item) for item in block.ranges],
            actions={
                action.value: block.is_action_on(action)
                for action in block.available_actions()
            },
            is_comment_approved=block.is_comment_approved,
            meta_comment_id=block.meta_comment_id,
            meta_site_id=block.meta_site_id,
            meta_links_home=block.meta_links_home,
            meta_titles_home=block.meta_titles_home,
        )


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int | None = None
    note_type: str | None = None
    read: bool = False
    timestamp: datetime | None = None
    url: str | None = None
    subject: list[BlockRead] = Field(default_factory=list)
    header: list[BlockRead] = Field(default_factory=list)
    body: list[BlockRead] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRead":
        return cls(
            id=notification.id,
            note_type=notification.note_type,
            read=notification.read,
            timestamp=notification.timestamp,
            url=notification.url,
            subject=[BlockRead.from_entity(block) for block in notification.subject],
            header=[BlockRead.from_entity(block) for block in notification.header],
            body=[BlockRead.from_entity(block) for block in notification.body],
        )


__all__ = ["BlockRead", "MediaRead", "NotificationRead", "RangeRead"]
