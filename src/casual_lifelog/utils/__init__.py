"""Utility helpers for casual-lifelog."""

from casual_lifelog.utils.timestamps import (
    epoch_ms_to_iso,
    iso_to_epoch_ms,
    new_snippet_id,
    now_ms,
)

__all__ = [
    "epoch_ms_to_iso",
    "iso_to_epoch_ms",
    "new_snippet_id",
    "now_ms",
]
