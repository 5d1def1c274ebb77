from __future__ import annotations

"""FluidSynth-based audio playback implementation."""

import sys
from typing import Dict

from ..app.presets import INSTRUMENTS
from .synthesis import SilentSynth, Synth


class FluidSynthSynth(Synth):
    """Concrete Synth using pyfluidsynth."""

    def __init__(self, soundfont_path: str, sample_rate: int = 44100, gain: float = 0.5, channel: int = 0) -> None:
        super().__init__(sample_rate=sample_rate, gain=gain)
        try:
            import fluidsynth  # type: ignore
        except ImportError as e:  # pragma: no cover - runtime dependency
            raise RuntimeError("pyfluidsynth is not installed") from e

        self.channel = channel
        self._fs = fluidsynth.Synth(samplerate=sample_rate, gain=gain)
        # Prefer CoreAudio on macOS to avoid SDL warnings
        if sys.platform == "darwin":
            self._fs.start(driver="coreaudio")
        else:
            self._fs.start()
        self._sfid = self._fs.sfload(soundfont_path)
        self._fs.program_select(self.channel, self._sfid, 0, 0)

    def select_instrument(self, program: int) -> None:
        self._fs.program_select(self.channel, self._sfid, 0, int(program))

    def note_on_raw(self, midi: int, velocity: int) -> None:
        self._fs.noteon(self.channel, int(midi), max(0, min(127, int(velocity))))

    def note_off_raw(self, midi: int) -> None:
        self._fs.noteoff(self.channel, int(midi))

    def close(self) -> None:
        self._fs.delete()


def make_synth_from_config(cfg: Dict) -> Synth:
    """Factory for Synth from config dict, with the instrument selected."""
    audio = cfg.get("audio", {})
    backend = audio.get("backend", "fluidsynth")
    if backend == "fluidsynth":
        synth: Synth = FluidSynthSynth(
            soundfont_path=audio.get("soundfont_path"),
            sample_rate=int(audio.get("sample_rate", 44100)),
            gain=float(audio.get("gain", 0.5)),
        )
    elif backend == "none":
        synth = SilentSynth()
    else:
        raise ValueError(f"Unsupported backend: {backend}")
    instrument = INSTRUMENTS.get(audio.get("instrument", "acoustic"), INSTRUMENTS["acoustic"])
    synth.select_instrument(int(instrument["program"]))
    return synth
