from __future__ import annotations

"""Randomness helpers: the session's injectable generator."""

import os
import random
from typing import Optional


def _env_seed() -> Optional[int]:
    seed = os.environ.get("SEED")
    if seed is None:
        return None
    try:
        return int(seed)
    except ValueError:
        return None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a dedicated generator for a practice session.

    Uses ``seed`` when given, else the SEED env var, else OS entropy.
    """
    if seed is None:
        seed = _env_seed()
    return random.Random(seed)
