"""Use cases that build notifications from raw service payloads."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from notekit.domain.entities import Notification

logger = logging.getLogger(__name__)


def parse_notification(payload: Mapping[str, Any]) -> Notification:
    """Return the :class:`Notification` described by ``payload``."""

    notification = Notification.from_dict(payload)
    logger.debug(
        "Parsed notification %s with %d blocks",
        notification.id,
        len(notification.blocks),
    )
    return notification


def parse_notifications(payloads: Iterable[Any]) -> list[Notification]:
    """Parse every mapping in ``payloads`` preserving order.

    Entries that are not mappings cannot describe a notification and are
    skipped.
    """

    notifications: list[Notification] = []
    skipped = 0
    for payload in payloads:
        if not isinstance(payload, Mapping):
            skipped += 1
            continue
        notifications.append(parse_notification(payload))

    if skipped:
        logger.warning("Skipped %d notification payloads that were not objects", skipped)
    return notifications


__all__ = ["parse_notification", "parse_notifications"]
