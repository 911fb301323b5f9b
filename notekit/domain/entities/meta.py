"""Typed view over the ``meta`` section of notification payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from notekit.utils import as_int, as_mapping, as_str, as_url

META_IDS = "ids"
META_LINKS = "links"
META_TITLES = "titles"

KEY_SITE = "site"
KEY_POST = "post"
KEY_COMMENT = "comment"
KEY_REPLY = "reply_comment"
KEY_HOME = "home"


@dataclass(frozen=True)
class MetaIds:
    """Identifiers referenced by a notification or block."""

    site: int | None = None
    post: int | None = None
    comment: int | None = None
    reply_comment: int | None = None
    home: int | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> "MetaIds":
        section = as_mapping(raw) or {}
        return cls(
            site=as_int(section.get(KEY_SITE)),
            post=as_int(section.get(KEY_POST)),
            comment=as_int(section.get(KEY_COMMENT)),
            reply_comment=as_int(section.get(KEY_REPLY)),
            home=as_int(section.get(KEY_HOME)),
        )


@dataclass(frozen=True)
class MetaLinks:
    """Absolute links referenced by a notification or block."""

    site: str | None = None
    post: str | None = None
    comment: str | None = None
    reply_comment: str | None = None
    home: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> "MetaLinks":
        section = as_mapping(raw) or {}
        return cls(
            site=as_url(section.get(KEY_SITE)),
            post=as_url(section.get(KEY_POST)),
            comment=as_url(section.get(KEY_COMMENT)),
            reply_comment=as_url(section.get(KEY_REPLY)),
            home=as_url(section.get(KEY_HOME)),
        )


@dataclass(frozen=True)
class MetaTitles:
    """Display titles referenced by a notification or block."""

    site: str | None = None
    post: str | None = None
    comment: str | None = None
    reply_comment: str | None = None
    home: str | None = None

    @classmethod
    def from_dict(cls, raw: Any) -> "MetaTitles":
        section = as_mapping(raw) or {}
        return cls(
            site=as_str(section.get(KEY_SITE)),
            post=as_str(section.get(KEY_POST)),
            comment=as_str(section.get(KEY_COMMENT)),
            reply_comment=as_str(section.get(KEY_REPLY)),
            home=as_str(section.get(KEY_HOME)),
        )


@dataclass(frozen=True)
class BlockMeta:
    """Meta sections parsed once; every missing or mis-shaped value is ``None``."""

    ids: MetaIds = field(default_factory=MetaIds)
    links: MetaLinks = field(default_factory=MetaLinks)
    titles: MetaTitles = field(default_factory=MetaTitles)

    @classmethod
    def from_dict(cls, raw: Any) -> "BlockMeta":
        meta = as_mapping(raw)
        if meta is None:
            return cls()
        return cls(
            ids=MetaIds.from_dict(meta.get(META_IDS)),
            links=MetaLinks.from_dict(meta.get(META_LINKS)),
            titles=MetaTitles.from_dict(meta.get(META_TITLES)),
        )


__all__ = ["BlockMeta", "MetaIds", "MetaLinks", "MetaTitles"]
