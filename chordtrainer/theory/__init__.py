"""Chord engine: pitch table, interval resolution, chord building and curriculum."""

from .errors import (  # noqa: F401
    TheoryError,
    InvalidPitchClass,
    InvalidOctaveIndex,
    UnknownChordQuality,
    UnknownDifficultyTier,
)
from .pitch import frequency_of  # noqa: F401
from .keys import note_at_interval, normalize_name  # noqa: F401
from .formulas import CHORD_QUALITIES, ChordQuality, chord_formula  # noqa: F401
from .naming import format_chord_name  # noqa: F401
from .chord import Chord, Note, build_chord, build_slash_chord, prefers_flats  # noqa: F401
from .curriculum import generate_chord_set, list_tiers  # noqa: F401
