from __future__ import annotations

"""Configuration loading and validation for chordtrainer.

Loads YAML configuration, applies defaults, and validates enumerations
and ranges before a practice session starts.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..app.presets import INSTRUMENTS
from ..theory.curriculum import TIERS


ALLOWED_BACKENDS = {"fluidsynth", "none"}
ALLOWED_INSTRUMENTS = set(INSTRUMENTS)
ALLOWED_DIFFICULTIES = set(TIERS)

MIN_TIME_PER_CHORD_S = 1
MAX_TIME_PER_CHORD_S = 45


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Could not parse config file {path}: {e}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def _clamp_int(value: Any, lo: int, hi: int, default: int, label: str) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError):
        print(f"WARNING: Invalid {label} '{value}', using {default}.")
        return default
    if v < lo or v > hi:
        clamped = max(lo, min(hi, v))
        print(f"WARNING: {label} {v} outside {lo}..{hi}, using {clamped}.")
        return clamped
    return v


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported enum values fall back to a safe default with a warning.
    A missing SoundFont switches the audio backend to "none" so the
    trainer still runs silently.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    cfg.setdefault("audio", {})
    cfg.setdefault("session", {})

    audio = cfg["audio"]
    session = cfg["session"]

    audio.setdefault("backend", "fluidsynth")
    audio.setdefault("soundfont_path", "./soundfonts/GeneralUser.sf2")
    audio.setdefault("sample_rate", 44100)
    audio.setdefault("gain", 0.5)
    audio.setdefault("instrument", "acoustic")
    audio.setdefault("strum_ms", 50)
    audio.setdefault("sustain_ms", 2000)

    session.setdefault("difficulty", "beginner")
    session.setdefault("time_per_chord_s", 10)
    session.setdefault("advance_delay_s", 1)
    session.setdefault("show_notes", False)


    backend = audio.get("backend")
    if backend not in ALLOWED_BACKENDS:
        print(f"WARNING: Unsupported audio backend '{backend}', falling back to 'fluidsynth'.")
        audio["backend"] = "fluidsynth"

    instrument = audio.get("instrument")
    if instrument not in ALLOWED_INSTRUMENTS:
        print(f"WARNING: Unsupported instrument '{instrument}', using 'acoustic'.")
        audio["instrument"] = "acoustic"

    difficulty = session.get("difficulty")
    if difficulty not in ALLOWED_DIFFICULTIES:
        print(f"WARNING: Unsupported difficulty '{difficulty}', using 'beginner'.")
        session["difficulty"] = "beginner"

    session["time_per_chord_s"] = _clamp_int(
        session.get("time_per_chord_s"), MIN_TIME_PER_CHORD_S, MAX_TIME_PER_CHORD_S, 10, "time_per_chord_s"
    )
    session["advance_delay_s"] = _clamp_int(session.get("advance_delay_s"), 0, 10, 1, "advance_delay_s")
    session["show_notes"] = bool(session.get("show_notes", False))
    audio["strum_ms"] = _clamp_int(audio.get("strum_ms"), 0, 1000, 50, "strum_ms")
    audio["sustain_ms"] = _clamp_int(audio.get("sustain_ms"), 1, 10000, 2000, "sustain_ms")

    if audio["backend"] == "fluidsynth":
        sf_path = Path(str(audio.get("soundfont_path", "")))
        if not sf_path.exists():
            print(
                f"WARNING: SoundFont not found at '{sf_path}'. Place a .sf2 in ./soundfonts "
                "and update the path; continuing without sound.",
                file=sys.stderr,
            )
            audio["backend"] = "none"

    return cfg
