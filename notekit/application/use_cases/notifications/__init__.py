"""Public helpers for working with parsed notifications."""

from .actions import revert_action, toggle_action
from .parsing import parse_notification, parse_notifications

__all__ = [
    "parse_notification",
    "parse_notifications",
    "revert_action",
    "toggle_action",
]
