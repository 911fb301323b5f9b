"""Tests for building notification blocks from raw payloads."""

import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from notekit.domain.entities import (
    BlockKind,
    MediaKind,
    Notification,
    NotificationBlock,
    RangeKind,
    blocks_from_list,
)


def _build_parent(comment_id=None) -> Notification:
    notification = Notification.from_dict({"id": 1, "meta": {"ids": {"comment": comment_id}}})
    return notification


def test_empty_payload_builds_text_block():
    block = NotificationBlock.from_dict({}, _build_parent())

    assert block.kind is BlockKind.TEXT
    assert block.media == ()
    assert block.ranges == ()
    assert block.text is None
    assert block.actions is None
    assert block.meta_comment_id is None


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "text",
        42,
        ["not", "a", "mapping"],
        {"media": "nope", "ranges": {"a": 1}, "actions": [], "meta": 3, "type": 7, "text": 9},
        {"meta": {"ids": "x", "links": [], "titles": None}},
        {"meta": {"ids": {"comment": "12", "site": True}, "links": {"home": 5}}},
    ],
)
def test_malformed_payloads_degrade_to_absent_values(payload):
    block = NotificationBlock.from_dict(payload, _build_parent(comment_id=12))

    assert block.kind is BlockKind.TEXT
    assert block.media == ()
    assert block.ranges == ()
    assert block.text is None
    assert block.raw_type is None
    assert block.meta_comment_id is None
    assert block.meta_site_id is None
    assert block.meta_links_home is None
    assert block.meta_titles_home is None
    assert block.is_comment_approved is True


def test_payload_fields_are_extracted():
    payload = {
        "text": "Jane liked your post",
        "type": "post",
        "actions": {"like-comment": True},
        "media": [
            {"type": "image", "url": "https://cdn.example.com/a.png", "width": 40, "height": 30},
            "garbage",
            {"type": "badge", "url": "https://cdn.example.com/badge.png"},
        ],
        "ranges": [
            {"type": "user", "id": 7, "url": "https://example.com/jane", "indices": [0, 4]},
            {"type": "comment", "id": 99, "indices": [5, 10]},
        ],
        "meta": {
            "ids": {"site": 3, "post": 4, "comment": 5, "reply_comment": 6},
            "links": {"home": "https://example.com"},
            "titles": {"home": "Example Blog"},
        },
    }

    block = NotificationBlock.from_dict(payload, _build_parent())

    assert block.text == "Jane liked your post"
    assert block.raw_type == "post"
    assert [media.kind for media in block.media] == [MediaKind.IMAGE, MediaKind.BADGE]
    assert block.media[0].size == (40, 30)
    assert [item.kind for item in block.ranges] == [RangeKind.USER, RangeKind.COMMENT]
    assert block.ranges[0].user_id == 7
    assert block.ranges[0].indices == (0, 4)
    assert block.ranges[1].comment_id == 99
    assert block.meta_site_id == 3
    assert block.meta_comment_id == 5
    assert block.meta.ids.reply_comment == 6
    assert block.meta_links_home == "https://example.com"
    assert block.meta_titles_home == "Example Blog"


def test_meta_links_home_rejects_invalid_url():
    block = NotificationBlock.from_dict(
        {"meta": {"links": {"home": "not a url"}}}, _build_parent()
    )

    assert block.meta_links_home is None


def test_image_urls_skip_non_images_and_missing_urls():
    payload = {
        "media": [
            {"type": "badge", "url": "https://cdn.example.com/badge.png"},
            {"type": "image", "url": "https://cdn.example.com/1.png"},
            {"type": "image"},
            {"type": "video", "url": "https://cdn.example.com/v.mp4"},
            {"type": "image", "url": "https://cdn.example.com/2.png"},
        ]
    }

    block = NotificationBlock.from_dict(payload, _build_parent())

    assert block.image_urls == [
        "https://cdn.example.com/1.png",
        "https://cdn.example.com/2.png",
    ]


def test_single_image_payload():
    block = NotificationBlock.from_dict(
        {"media": [{"type": "image", "url": "http://x/y.png"}]}, _build_parent()
    )

    assert block.kind is BlockKind.IMAGE
    assert block.image_urls == ["http://x/y.png"]


def test_blocks_from_list_preserves_order_and_length():
    parent = _build_parent()
    payloads = [{"text": "first"}, "junk", {"text": "third"}]

    blocks = blocks_from_list(payloads, parent)

    assert [block.text for block in blocks] == ["first", None, "third"]
    assert all(block.parent is parent for block in blocks)
