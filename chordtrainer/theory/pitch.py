from __future__ import annotations

"""Equal-tempered frequency table for octave indices 0..5.

Octave numbers match the pitch labels sent to playback ("C3", "A4"), with
concert A (A4) at 440 Hz. Each octave is the previous one scaled by two;
values are rounded to 0.01 Hz.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidOctaveIndex
from .keys import PITCH_CLASS_NAMES, normalize_name


CONCERT_A_HZ = 440.0
MIN_OCTAVE = 0
MAX_OCTAVE = 5


# Octave index is the scientific octave: A4 = 440 Hz, so A3 = 220 Hz and C3 = 130.81 Hz.
# DESIGN.md "Octave anchor" records why this is not A3 = 440 Hz.
def _build_table() -> Mapping[str, Tuple[float, ...]]:
    table = {}
    for pc, name in enumerate(PITCH_CLASS_NAMES):
        # A0 = 27.5 Hz; pitch class pc sits (pc - 9) semitones from A in the same octave
        base = CONCERT_A_HZ / 16.0 * 2 ** ((pc - 9) / 12)
        table[name] = tuple(round(base * 2 ** octave, 2) for octave in range(MIN_OCTAVE, MAX_OCTAVE + 1))
    return MappingProxyType(table)


NOTE_FREQUENCIES: Mapping[str, Tuple[float, ...]] = _build_table()


def frequency_of(name: str, octave: int) -> float:
    """Return the frequency in Hz of a pitch class at an octave index.

    Flat aliases are accepted and resolve to the same frequency as their
    sharp spelling.

    Raises:
        InvalidPitchClass: unknown name.
        InvalidOctaveIndex: octave not an integer in 0..5.
    """
    canonical = normalize_name(name)
    if isinstance(octave, bool) or not isinstance(octave, int):
        raise InvalidOctaveIndex(octave)
    if octave < MIN_OCTAVE or octave > MAX_OCTAVE:
        raise InvalidOctaveIndex(octave)
    return NOTE_FREQUENCIES[canonical][octave]
