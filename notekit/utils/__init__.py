"""Utility helpers for reusable functionality."""

from .coercion import (
    as_flag,
    as_index_range,
    as_int,
    as_mapping,
    as_mapping_list,
    as_str,
    as_url,
)

__all__ = [
    "as_flag",
    "as_index_range",
    "as_int",
    "as_mapping",
    "as_mapping_list",
    "as_str",
    "as_url",
]
