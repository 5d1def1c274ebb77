from __future__ import annotations

"""Error taxonomy for the chord engine."""


class TheoryError(ValueError):
    """Base class for malformed input to the chord engine."""


class InvalidPitchClass(TheoryError):
    def __init__(self, name: object) -> None:
        super().__init__(f"Unsupported note name: {name!r}")
        self.name = name


class InvalidOctaveIndex(TheoryError):
    def __init__(self, octave: object) -> None:
        super().__init__(f"Octave index out of range 0..5: {octave!r}")
        self.octave = octave


class UnknownChordQuality(TheoryError, KeyError):
    def __init__(self, quality: object) -> None:
        super().__init__(f"Unknown chord quality: {quality!r}")
        self.quality = quality

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class UnknownDifficultyTier(TheoryError):
    def __init__(self, tier: object) -> None:
        super().__init__(f"Unknown difficulty: {tier!r}")
        self.tier = tier
