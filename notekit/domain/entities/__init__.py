"""Domain entities exposed by the library."""

from .block import BlockAction, BlockKind, NotificationBlock, blocks_from_list
from .media import MediaKind, NotificationMedia, media_from_list
from .meta import BlockMeta, MetaIds, MetaLinks, MetaTitles
from .notification import Notification, OverrideListener
from .range import NotificationRange, RangeKind, ranges_from_list

__all__ = [
    "BlockAction",
    "BlockKind",
    "BlockMeta",
    "MediaKind",
    "MetaIds",
    "MetaLinks",
    "MetaTitles",
    "Notification",
    "NotificationBlock",
    "NotificationMedia",
    "NotificationRange",
    "OverrideListener",
    "RangeKind",
    "blocks_from_list",
    "media_from_list",
    "ranges_from_list",
]
