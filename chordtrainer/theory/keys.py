from __future__ import annotations

"""Pitch-class names, enharmonic handling and interval resolution.

Pitch classes are indexed 0..11 from C. Every name is first normalized to
its canonical sharp spelling; the flat table shares the same indices and
only changes how a result is spelled.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidPitchClass


PITCH_CLASS_NAMES: Tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
PITCH_CLASS_NAMES_FLAT: Tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

_ENHARMONIC: Mapping[str, str] = MappingProxyType({
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
    # rare spellings, accepted as roots
    "Cb": "B",
    "Fb": "E",
    "E#": "F",
    "B#": "C",
})


def normalize_name(name: str) -> str:
    """Return the canonical sharp spelling for a pitch-class name.

    Raises:
        InvalidPitchClass: if the name is not a known spelling.
    """
    if not isinstance(name, str):
        raise InvalidPitchClass(name)
    norm = _ENHARMONIC.get(name, name)
    if norm not in PITCH_CLASS_NAMES:
        raise InvalidPitchClass(name)
    return norm


def pitch_class_index(name: str) -> int:
    return PITCH_CLASS_NAMES.index(normalize_name(name))


def note_at_interval(root: str, semitones: int, use_flats: bool = False) -> str:
    """Return the pitch class ``semitones`` above ``root``.

    Offsets above 11 wrap around (the octave is handled by the caller).

    Args:
        root: Root name, sharp, flat or rare alias (e.g. "Cb").
        semitones: Half steps above the root.
        use_flats: Spell the result from the flat table.

    Returns:
        Pitch-class name, e.g. ``note_at_interval("C", 3, True) == "Eb"``.
    """
    target = (pitch_class_index(root) + int(semitones)) % 12
    return PITCH_CLASS_NAMES_FLAT[target] if use_flats else PITCH_CLASS_NAMES[target]


def note_name_to_midi(name: str, octave: int) -> int:
    """Convert note name and octave to MIDI number (C4 = 60)."""
    midi = (octave + 1) * 12 + pitch_class_index(name)
    if midi < 0 or midi > 127:
        raise ValueError("MIDI out of range")
    return midi


def note_str_to_midi(note: str) -> int:
    """Parse a pitch label like 'C3', 'Db3', 'G#5' into a MIDI number."""
    if not note or len(note) < 2:
        raise ValueError(f"Invalid note string: {note}")
    name = note[0].upper()
    idx = 1
    if idx < len(note) and note[idx] in ("#", "b"):
        name += note[idx]
        idx += 1
    try:
        octave = int(note[idx:])
    except ValueError as e:
        raise ValueError(f"Invalid octave in note string: {note}") from e
    return note_name_to_midi(name, octave)
