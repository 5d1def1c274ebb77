from __future__ import annotations

"""Abstract-ish audio synthesis interface.

Concrete implementations provide note playback; strumming is built on top
by scheduling note onsets a fixed gap apart, lowest note first.
"""

import time
from typing import List, Sequence, Tuple

from ..theory.keys import note_str_to_midi


class Synth:
    """Abstract-like synth interface for playback engines."""

    def __init__(self, sample_rate: int, gain: float) -> None:
        self.sample_rate = sample_rate
        self.gain = gain

    def select_instrument(self, program: int) -> None:
        """Select a General MIDI program for chord playback."""
        raise NotImplementedError

    def note_on_raw(self, midi: int, velocity: int) -> None:
        raise NotImplementedError

    def note_off_raw(self, midi: int) -> None:
        raise NotImplementedError

    def note_on(self, midi: int, velocity: int = 100, dur_ms: int = 500) -> None:
        """Play a single note for a duration in milliseconds."""
        self.note_on_raw(midi, velocity)
        self.sleep_ms(dur_ms)
        self.note_off_raw(midi)

    def play_chord(self, midis: List[int], velocity: int = 90, dur_ms: int = 800) -> None:
        """Play a chord (simultaneous notes)."""
        self.strum(midis, stagger_ms=0, dur_ms=dur_ms, velocity=velocity)

    def strum(self, notes: Sequence[int | str], stagger_ms: int = 50, dur_ms: int = 2000, velocity: int = 90) -> None:
        """Play notes in the given order with ``stagger_ms`` between onsets.

        Each note sounds for ``dur_ms`` from its own onset. Notes may be
        MIDI numbers or pitch labels such as "C3".
        """
        midis = [n if isinstance(n, int) else note_str_to_midi(n) for n in notes]
        for i, m in enumerate(midis):
            if i and stagger_ms:
                self.sleep_ms(stagger_ms)
            self.note_on_raw(m, velocity)
        # last onset is at (n-1)*stagger; first note ends at dur_ms
        self.sleep_ms(max(0, dur_ms - stagger_ms * (len(midis) - 1)))
        for i, m in enumerate(midis):
            if i and stagger_ms:
                self.sleep_ms(stagger_ms)
            self.note_off_raw(m)

    def sleep_ms(self, ms: int) -> None:
        time.sleep(ms / 1000.0)

    def close(self) -> None:
        """Release resources."""
        pass


class SilentSynth(Synth):
    """Synth that makes no sound; records note events instead.

    Used when audio is disabled and by tests.
    """

    def __init__(self, sample_rate: int = 44100, gain: float = 0.5) -> None:
        super().__init__(sample_rate=sample_rate, gain=gain)
        self.program = 0
        self.elapsed_ms = 0
        self.events: List[Tuple[str, int, int]] = []  # (kind, midi, at_ms)

    def select_instrument(self, program: int) -> None:
        self.program = int(program)

    def note_on_raw(self, midi: int, velocity: int) -> None:
        self.events.append(("on", int(midi), self.elapsed_ms))

    def note_off_raw(self, midi: int) -> None:
        self.events.append(("off", int(midi), self.elapsed_ms))

    def sleep_ms(self, ms: int) -> None:
        self.elapsed_ms += int(ms)
