"""Tests for block classification and equality."""

import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from notekit.domain.entities import (
    BlockAction,
    BlockKind,
    BlockMeta,
    MetaIds,
    Notification,
    NotificationBlock,
)

_IMAGE_MEDIA = [{"type": "image", "url": "https://cdn.example.com/a.png"}]
_COMMENT_META = {"ids": {"comment": 10, "site": 2}}


def _build_parent(comment_id: int | None = 10) -> Notification:
    return Notification(id=1, meta=BlockMeta(ids=MetaIds(comment=comment_id)))


def test_user_type_wins_over_every_other_signal():
    payload = {"type": "user", "meta": _COMMENT_META, "media": _IMAGE_MEDIA}

    block = NotificationBlock.from_dict(payload, _build_parent())

    assert block.kind is BlockKind.USER


def test_matching_comment_ids_with_site_is_comment():
    payload = {"meta": _COMMENT_META, "media": _IMAGE_MEDIA}

    block = NotificationBlock.from_dict(payload, _build_parent())

    assert block.kind is BlockKind.COMMENT


@pytest.mark.parametrize(
    ("meta", "parent_comment_id"),
    [
        ({"ids": {"comment": 10}}, 10),
        ({"ids": {"comment": 11, "site": 2}}, 10),
        ({"ids": {"comment": 10, "site": 2}}, None),
        ({"ids": {"site": 2}}, 10),
    ],
)
def test_comment_requires_site_and_matching_ids(meta, parent_comment_id):
    payload = {"meta": meta, "media": _IMAGE_MEDIA}

    block = NotificationBlock.from_dict(payload, _build_parent(parent_comment_id))

    assert block.kind is BlockKind.IMAGE


def test_comment_requires_parent():
    block = NotificationBlock.from_dict({"meta": _COMMENT_META})

    assert block.kind is BlockKind.TEXT


@pytest.mark.parametrize(
    ("media", "expected"),
    [
        ([{"type": "image"}], BlockKind.IMAGE),
        ([{"type": "badge"}], BlockKind.IMAGE),
        ([{"type": "video"}, {"type": "image"}], BlockKind.TEXT),
        ([{"type": "something-new"}], BlockKind.TEXT),
        ([], BlockKind.TEXT),
    ],
)
def test_image_kind_uses_first_media_only(media, expected):
    block = NotificationBlock.from_dict({"media": media}, _build_parent())

    assert block.kind is expected


def test_blocks_with_same_shape_are_equal_regardless_of_overrides():
    parent = _build_parent()
    payload = {
        "text": "Hello",
        "actions": {"approve-comment": False},
        "ranges": [{"type": "post", "id": 1}],
    }
    first = NotificationBlock.from_dict(payload, parent)
    second = NotificationBlock.from_dict(payload, parent)

    first.set_override(BlockAction.APPROVE, True)

    assert first == second


def test_equality_ignores_range_and_media_contents():
    parent = _build_parent()
    first = NotificationBlock.from_dict(
        {"text": "Hi", "ranges": [{"type": "post", "id": 1}]}, parent
    )
    second = NotificationBlock.from_dict(
        {"text": "Hi", "ranges": [{"type": "site", "url": "https://example.com"}]}, parent
    )

    assert first == second


@pytest.mark.parametrize(
    "other_payload",
    [
        {"text": "Bye"},
        {"text": "Hello", "type": "user"},
        {"text": "Hello", "ranges": [{"type": "post"}]},
        {"text": "Hello", "media": [{"type": "video"}]},
    ],
)
def test_blocks_differing_in_compared_fields_are_not_equal(other_payload):
    parent = _build_parent()
    block = NotificationBlock.from_dict({"text": "Hello"}, parent)

    assert block != NotificationBlock.from_dict(other_payload, parent)


def test_blocks_with_different_parents_are_not_equal():
    payload = {"text": "Hello"}

    first = NotificationBlock.from_dict(payload, _build_parent())
    second = NotificationBlock.from_dict(payload, _build_parent())

    assert first != second


def test_blocks_are_not_hashable():
    block = NotificationBlock.from_dict({}, _build_parent())

    with pytest.raises(TypeError):
        hash(block)


def test_integral_float_comment_ids_match_parent():
    payload = {"meta": {"ids": {"comment": 10.0, "site": 2.0}}}

    block = NotificationBlock.from_dict(payload, _build_parent(10))

    assert block.meta_comment_id == 10
    assert block.kind is BlockKind.COMMENT
