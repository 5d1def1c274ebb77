from __future__ import annotations

"""Practice session driver: chord pool, countdown and scoring.

The driver is front-end agnostic. A UI calls ``start`` once, then
``mark_correct``/``skip`` on user input and ``tick`` as wall time passes;
it reads ``current``, ``hint()`` and ``progress()`` for display. All
randomness comes from the injected generator.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..audio.synthesis import Synth
from ..stats.stats import new_session_stats, update_stats
from ..theory.chord import Chord
from ..theory.curriculum import generate_chord_set
from ..theory.errors import TheoryError
from .explain import trace as xtrace


PoolFactory = Callable[[str], List[Chord]]


@dataclass(frozen=True)
class PlaybackPolicy:
    stagger_ms: int = 50
    sustain_ms: int = 2000
    velocity: int = 90


class PracticeSession:
    def __init__(
        self,
        pool_factory: PoolFactory = generate_chord_set,
        rng: Optional[random.Random] = None,
        time_per_chord_s: int = 10,
        advance_delay_s: int = 1,
    ) -> None:
        if time_per_chord_s < 1:
            raise ValueError("time_per_chord_s must be >= 1")
        self.pool_factory = pool_factory
        self.rng = rng or random.Random()
        self.time_per_chord_s = int(time_per_chord_s)
        self.advance_delay_s = max(0, int(advance_delay_s))

        self.state = "setup"
        self.difficulty: Optional[str] = None
        self.pool: List[Chord] = []
        self.current: Optional[Chord] = None
        self.time_remaining: float = 0
        self.score = 0
        self.total = 0
        self.show_notes = False
        self.error: Optional[str] = None
        self.stats = new_session_stats()
        self._overdue_s = 0.0

    # --- lifecycle ---
    def start(self, difficulty: str) -> None:
        """Build the pool for ``difficulty`` and present the first chord.

        A pool that cannot be built (or is empty) puts the session in the
        "error" state instead of raising.
        """
        self.reset()
        self.difficulty = difficulty
        try:
            pool = list(self.pool_factory(difficulty))
        except TheoryError as e:
            self._fail(f"cannot build chord: {e}")
            return
        if not pool:
            self._fail(f"no chords for difficulty '{difficulty}'")
            return
        self.pool = pool
        self.state = "playing"
        xtrace("pool_generated", {"difficulty": difficulty, "size": len(pool)})
        xtrace("session_started", {"difficulty": difficulty, "time_per_chord_s": self.time_per_chord_s})
        self.next_chord()

    def reset(self) -> None:
        was_active = self.state != "setup"
        self.state = "setup"
        self.difficulty = None
        self.pool = []
        self.current = None
        self.time_remaining = 0
        self.score = 0
        self.total = 0
        self.show_notes = False
        self.error = None
        self.stats = new_session_stats()
        self._overdue_s = 0.0
        if was_active:
            xtrace("session_reset", {})

    def _fail(self, message: str) -> None:
        self.state = "error"
        self.error = message
        self.pool = []
        self.current = None
        xtrace("session_error", {"difficulty": self.difficulty, "error": message})

    def _require_playing(self) -> None:
        if self.state != "playing":
            raise RuntimeError(f"session is not playing (state={self.state})")

    def _require_current(self) -> Chord:
        self._require_playing()
        if self.current is None:
            raise RuntimeError("no chord is being presented")
        return self.current

    # --- chord flow ---
    def next_chord(self) -> Chord:
        """Draw the next chord uniformly at random from the pool."""
        self._require_playing()
        chord = self.rng.choice(self.pool)
        self.current = chord
        self.time_remaining = self.time_per_chord_s
        self._overdue_s = 0.0
        self.total += 1
        xtrace("chord_presented", {"index": self.total, "chord": chord.name})
        return chord

    def mark_correct(self) -> Chord:
        chord = self._require_current()
        self.score += 1
        update_stats(self.stats, chord.name, correct=True)
        xtrace("chord_marked", {"index": self.total, "chord": chord.name, "score": self.score})
        return self.next_chord()

    def skip(self) -> Chord:
        chord = self._require_current()
        update_stats(self.stats, chord.name, correct=False)
        xtrace("chord_skipped", {"index": self.total, "chord": chord.name})
        return self.next_chord()

    def tick(self, seconds: float = 1.0) -> bool:
        """Advance the countdown by ``seconds``.

        Once the countdown reaches zero the chord stays up for
        ``advance_delay_s`` more seconds and is then replaced, unscored.

        Returns:
            True if a new chord was presented.
        """
        if self.state != "playing" or seconds <= 0:
            return False
        advanced = False
        remaining = float(seconds)
        while True:
            if self.time_remaining > 0:
                if remaining <= 0:
                    break
                step = min(remaining, self.time_remaining)
                self.time_remaining -= step
                if self.time_remaining < 1e-9:
                    self.time_remaining = 0
                remaining -= step
                continue
            need = self.advance_delay_s - self._overdue_s
            if remaining < need:
                self._overdue_s += remaining
                break
            remaining -= need
            expired = self._require_current()
            update_stats(self.stats, expired.name, correct=False)
            xtrace("chord_timed_out", {"index": self.total, "chord": expired.name})
            self.next_chord()
            advanced = True
        return advanced

    # --- display helpers ---
    def toggle_notes(self) -> bool:
        self.show_notes = not self.show_notes
        return self.show_notes

    def hint(self) -> Tuple[str, ...]:
        """Note names of the current chord, in formula order."""
        if self.current is None:
            return ()
        return self.current.note_names

    def progress(self) -> float:
        """Fraction of the countdown left (1.0 = full)."""
        if self.state != "playing":
            return 0.0
        return self.time_remaining / self.time_per_chord_s

    def play_current(self, synth: Synth, policy: Optional[PlaybackPolicy] = None) -> None:
        """Strum the current chord low to high."""
        chord = self._require_current()
        policy = policy or PlaybackPolicy()
        xtrace("chord_played", {"chord": chord.name, "pitches": list(chord.pitches)})
        synth.strum(
            list(chord.pitches),
            stagger_ms=policy.stagger_ms,
            dur_ms=policy.sustain_ms,
            velocity=policy.velocity,
        )

    def summary(self) -> Dict[str, Any]:
        return {
            "difficulty": self.difficulty,
            "state": self.state,
            "score": self.score,
            "total": self.total,
            "per_chord": dict(self.stats.get("per_chord", {})),
            "error": self.error,
        }
