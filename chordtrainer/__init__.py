"""chordtrainer: name a chord, check it by ear and by notes.

The chord engine lives in ``chordtrainer.theory``; the practice session,
playback and CLI are thin layers on top of it.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
