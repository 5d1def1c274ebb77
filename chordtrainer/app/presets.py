from __future__ import annotations

"""Human-friendly labels for difficulty tiers and instruments.

Instrument programs are General MIDI presets (bank 0) selected on the
SoundFont used by the FluidSynth backend.
"""

DIFFICULTY_PRESETS = {
    "beginner": {"label": "Beginner", "description": "Standard Open Chords"},
    "novice": {"label": "Novice", "description": "All Triads & Dom 7ths"},
    "intermediate": {"label": "Intermediate", "description": "Inversions & 7th chords"},
    "advanced": {"label": "Advanced", "description": "Diminished, 9ths, alterations"},
    "jazz": {"label": "Jazz", "description": "Complex extensions & voicings"},
}

INSTRUMENTS = {
    "acoustic": {"label": "Acoustic Guitar", "program": 24},        # nylon string
    "electric_clean": {"label": "Electric Guitar", "program": 27},  # clean electric
    "piano": {"label": "Piano", "program": 0},                      # acoustic grand
}
