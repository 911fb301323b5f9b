"""Optimistic action helpers used while a moderation request is in flight."""

from __future__ import annotations

import logging

from notekit.domain.entities import BlockAction, NotificationBlock

logger = logging.getLogger(__name__)


def toggle_action(block: NotificationBlock, action: BlockAction) -> bool:
    """Flip ``action`` locally and return the new value.

    The override stays in place until :func:`revert_action` is called once the
    remote request settles.
    """

    if not block.is_action_enabled(action):
        raise ValueError(f"Action '{action.value}' is not available on this block")

    value = not block.is_action_on(action)
    block.set_override(action, value)
    logger.debug("Set optimistic override %s=%s", action.value, value)
    return value


def revert_action(block: NotificationBlock, action: BlockAction) -> None:
    """Drop the optimistic override for ``action`` so the server value applies."""

    block.remove_override(action)


__all__ = ["revert_action", "toggle_action"]
