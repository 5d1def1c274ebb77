from __future__ import annotations

"""Chord symbol formatting (root + quality suffix)."""

from .formulas import get_quality


def format_chord_name(root: str, quality: str) -> str:
    """Return a chord symbol such as "C", "Fm7" or "Bbmaj7#11".

    The root is used as spelled by the caller.

    Raises:
        UnknownChordQuality: quality missing from the table.
    """
    return f"{root}{get_quality(quality).suffix}"
