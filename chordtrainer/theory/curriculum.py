from __future__ import annotations

"""Difficulty curriculum: the practice pool of chords for each tier.

Every tier except ``beginner`` walks the twelve roots (naturals first,
then the flat roots) and builds the tier's recipe on each root, in recipe
order. ``beginner`` is the open-position (CAGED) majors followed by the
open minors.
"""

from typing import Dict, List, Tuple

from .chord import Chord, build_chord, build_slash_chord
from .errors import UnknownDifficultyTier


NATURAL_ROOTS: Tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")
FLAT_ROOTS: Tuple[str, ...] = ("Db", "Eb", "Gb", "Ab", "Bb")
ALL_ROOTS: Tuple[str, ...] = NATURAL_ROOTS + FLAT_ROOTS

OPEN_MAJOR_ROOTS: Tuple[str, ...] = ("C", "A", "G", "E", "D")
OPEN_MINOR_ROOTS: Tuple[str, ...] = ("A", "E", "D")

# (quality, inversion, slash)
Recipe = Tuple[Tuple[str, int, bool], ...]

_RECIPES: Dict[str, Recipe] = {
    "novice": (
        ("major", 0, False),
        ("minor", 0, False),
        ("7", 0, False),
    ),
    "intermediate": (
        ("major", 0, False),
        ("minor", 0, False),
        ("major", 1, True),   # e.g. C/E
        ("minor", 1, True),   # e.g. Am/C
        ("maj7", 0, False),
        ("min7", 0, False),
        ("7", 0, False),
        ("maj7", 1, True),    # e.g. Cmaj7/E
        ("maj7", 2, True),    # e.g. Fmaj7/C
        ("7", 3, True),       # seventh in the bass, e.g. C7/A#
    ),
    "advanced": tuple((q, 0, False) for q in ("diminished", "augmented", "min7b5", "dim7", "maj9", "9", "7#9")),
    "jazz": tuple((q, 0, False) for q in ("maj7#11", "7alt", "13", "maj13", "min11", "7#9#5", "7b9", "maj7#5")),
}

TIERS: Tuple[str, ...] = ("beginner", "novice", "intermediate", "advanced", "jazz")


def list_tiers() -> List[str]:
    return list(TIERS)


def require_tier(tier: str) -> str:
    """Validate a tier typed by a user.

    Raises:
        UnknownDifficultyTier: tier is not one of ``TIERS``.
    """
    if tier not in TIERS:
        raise UnknownDifficultyTier(tier)
    return tier


def tier_recipe(tier: str) -> Recipe:
    """Per-root recipe of a tier; ``beginner`` has none (fixed chord list)."""
    return _RECIPES.get(tier, ())


def _realize(root: str, quality: str, inversion: int, slash: bool) -> Chord:
    if slash:
        return build_slash_chord(root, quality, inversion)
    return build_chord(root, quality, inversion=inversion)


def _beginner() -> List[Chord]:
    chords = [build_chord(root, "major") for root in OPEN_MAJOR_ROOTS]
    chords.extend(build_chord(root, "minor") for root in OPEN_MINOR_ROOTS)
    return chords


def generate_chord_set(tier: str) -> List[Chord]:
    """Build the practice pool for a difficulty tier.

    An unknown tier yields an empty list rather than an error.
    """
    if tier == "beginner":
        return _beginner()
    recipe = _RECIPES.get(tier)
    if recipe is None:
        return []
    return [_realize(root, q, inv, slash) for root in ALL_ROOTS for q, inv, slash in recipe]
