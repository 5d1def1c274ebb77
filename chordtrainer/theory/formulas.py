from __future__ import annotations

"""Chord quality table: semitone offsets and display suffix per quality.

Offsets start at 0 (the root) and never decrease. Offsets of 12 and above
land in the next octave when a chord is built.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .errors import UnknownChordQuality


@dataclass(frozen=True)
class ChordQuality:
    id: str
    offsets: Tuple[int, ...]
    suffix: str


_QUALITIES: Tuple[ChordQuality, ...] = (
    # Triads
    ChordQuality("major", (0, 4, 7), ""),
    ChordQuality("minor", (0, 3, 7), "m"),
    ChordQuality("diminished", (0, 3, 6), "dim"),
    ChordQuality("augmented", (0, 4, 8), "aug"),
    ChordQuality("sus2", (0, 2, 7), "sus2"),
    ChordQuality("sus4", (0, 5, 7), "sus4"),
    # Sevenths
    ChordQuality("maj7", (0, 4, 7, 11), "maj7"),
    ChordQuality("min7", (0, 3, 7, 10), "m7"),
    ChordQuality("7", (0, 4, 7, 10), "7"),
    ChordQuality("min7b5", (0, 3, 6, 10), "m7b5"),  # half-diminished
    ChordQuality("dim7", (0, 3, 6, 9), "dim7"),
    ChordQuality("maj7#5", (0, 4, 8, 11), "maj7#5"),
    # Extended
    ChordQuality("maj9", (0, 4, 7, 11, 14), "maj9"),
    ChordQuality("min9", (0, 3, 7, 10, 14), "m9"),
    ChordQuality("9", (0, 4, 7, 10, 14), "9"),
    ChordQuality("7#9", (0, 4, 7, 10, 15), "7#9"),
    ChordQuality("7b9", (0, 4, 7, 10, 13), "7b9"),
    ChordQuality("add9", (0, 4, 7, 14), "add9"),
    ChordQuality("11", (0, 4, 7, 10, 14, 17), "11"),
    ChordQuality("min11", (0, 3, 7, 10, 14, 17), "m11"),
    ChordQuality("maj7#11", (0, 4, 7, 11, 18), "maj7#11"),
    ChordQuality("13", (0, 4, 7, 10, 14, 21), "13"),
    ChordQuality("maj13", (0, 4, 7, 11, 14, 21), "maj13"),
    # Altered
    ChordQuality("7alt", (0, 4, 10, 13, 15), "7alt"),
    ChordQuality("7#5", (0, 4, 8, 10), "7#5"),
    ChordQuality("7b5", (0, 4, 6, 10), "7b5"),
    ChordQuality("7#9#5", (0, 4, 8, 10, 15), "7#9#5"),
)

CHORD_QUALITIES: Mapping[str, ChordQuality] = MappingProxyType({q.id: q for q in _QUALITIES})


def get_quality(quality: str) -> ChordQuality:
    try:
        return CHORD_QUALITIES[quality]
    except (KeyError, TypeError):
        raise UnknownChordQuality(quality) from None


def chord_formula(quality: str) -> Tuple[int, ...]:
    """Return the semitone offsets for a quality id (e.g. "min7")."""
    return get_quality(quality).offsets


def list_qualities() -> List[str]:
    return [q.id for q in _QUALITIES]
