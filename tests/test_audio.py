import unittest

from chordtrainer.audio.playback import make_synth_from_config
from chordtrainer.audio.synthesis import SilentSynth


class SilentSynthTests(unittest.TestCase):
    def test_strum_accepts_pitch_labels(self) -> None:
        synth = SilentSynth()
        synth.strum(["E3", "G3", "C4"], stagger_ms=50, dur_ms=1000)
        ons = [m for kind, m, _t in synth.events if kind == "on"]
        self.assertEqual(ons, [52, 55, 60])
        self.assertEqual(synth.elapsed_ms, 1100)

    def test_play_chord_is_simultaneous(self) -> None:
        synth = SilentSynth()
        synth.play_chord([60, 64, 67], dur_ms=800)
        self.assertEqual([t for kind, _m, t in synth.events if kind == "on"], [0, 0, 0])
        self.assertEqual([t for kind, _m, t in synth.events if kind == "off"], [800, 800, 800])

    def test_note_on(self) -> None:
        synth = SilentSynth()
        synth.note_on(69, dur_ms=300)
        self.assertEqual(synth.events, [("on", 69, 0), ("off", 69, 300)])


class FactoryTests(unittest.TestCase):
    def test_silent_backend_selects_instrument(self) -> None:
        synth = make_synth_from_config({"audio": {"backend": "none", "instrument": "electric_clean"}})
        self.assertIsInstance(synth, SilentSynth)
        self.assertEqual(synth.program, 27)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            make_synth_from_config({"audio": {"backend": "midi-cable"}})


if __name__ == "__main__":
    unittest.main()
