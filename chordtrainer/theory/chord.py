from __future__ import annotations

"""Concrete chords: named notes with frequencies, inversions and slash chords.

A chord keeps two orderings of the same notes. ``notes`` follows the
formula (root, third, fifth, ...) and drives the note-name hint;
``voicing`` is sorted low to high and drives playback.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

from .formulas import chord_formula
from .keys import note_at_interval
from .naming import format_chord_name
from .pitch import frequency_of


FLAT_ROOTS: FrozenSet[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"})
# Roots without an accidental whose minor/diminished chords read better with flats (Cm, Gm, Ddim)
MINOR_FLAT_ROOTS: FrozenSet[str] = frozenset({"C", "G", "D"})
MINOR_QUALITY_MARKERS: Tuple[str, ...] = ("min", "dim", "m7")


@dataclass(frozen=True)
class Note:
    name: str
    octave: int
    frequency: float

    @property
    def pitch(self) -> str:
        """Pitch label for playback, e.g. "C3"."""
        return f"{self.name}{self.octave}"

    def raised_octave(self) -> "Note":
        return Note(name=self.name, octave=self.octave + 1, frequency=self.frequency * 2)


@dataclass(frozen=True)
class Chord:
    """A built chord, ready for display and playback."""

    name: str
    notes: Tuple[Note, ...]      # formula order
    voicing: Tuple[Note, ...]    # ascending frequency
    root: str
    quality: str
    inversion: int = 0

    @property
    def note_names(self) -> Tuple[str, ...]:
        return tuple(n.name for n in self.notes)

    @property
    def pitches(self) -> Tuple[str, ...]:
        return tuple(n.pitch for n in self.voicing)

    @property
    def bass(self) -> Note:
        return self.voicing[0]


def prefers_flats(root: str, quality: str) -> bool:
    """Spelling policy: should chord tones on this root use flat names?"""
    if root in FLAT_ROOTS:
        return True
    return root in MINOR_FLAT_ROOTS and any(m in quality for m in MINOR_QUALITY_MARKERS)


def build_chord(root: str, quality: str, octave: int = 3, inversion: int = 0) -> Chord:
    """Build a chord on ``root`` with its root at ``octave``.

    Args:
        root: Root name; flats and rare aliases are accepted.
        quality: Quality id from the formula table (e.g. "maj7").
        octave: Octave index of the root (0..5).
        inversion: Number of notes, in formula order, raised one octave.
            Values at or above the chord size raise every note.

    Returns:
        The chord, named with ``format_chord_name``.

    Raises:
        UnknownChordQuality, InvalidPitchClass, InvalidOctaveIndex.
    """
    formula = chord_formula(quality)
    if inversion < 0:
        raise ValueError(f"inversion must be >= 0, got {inversion}")
    use_flats = prefers_flats(root, quality)

    notes: List[Note] = []
    for offset in formula:
        name = note_at_interval(root, offset, use_flats)
        note_octave = octave + offset // 12
        notes.append(Note(name=name, octave=note_octave, frequency=frequency_of(name, note_octave)))

    for i in range(min(inversion, len(notes))):
        notes[i] = notes[i].raised_octave()

    voicing = sorted(notes, key=lambda n: n.frequency)
    return Chord(
        name=format_chord_name(root, quality),
        notes=tuple(notes),
        voicing=tuple(voicing),
        root=root,
        quality=quality,
        inversion=inversion,
    )


def build_slash_chord(root: str, quality: str, inversion: int, octave: int = 3) -> Chord:
    """Build an inverted chord labelled "<chord>/<bass>".

    The bass is the lowest note after the inversion, which is not always
    the note the inversion promoted past.
    """
    chord = build_chord(root, quality, octave=octave, inversion=inversion)
    return Chord(
        name=f"{chord.name}/{chord.bass.name}",
        notes=chord.notes,
        voicing=chord.voicing,
        root=chord.root,
        quality=chord.quality,
        inversion=chord.inversion,
    )
