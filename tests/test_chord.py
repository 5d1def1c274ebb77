import unittest
from collections import Counter

from chordtrainer.theory.chord import Note, build_chord, build_slash_chord, prefers_flats
from chordtrainer.theory.errors import InvalidOctaveIndex, InvalidPitchClass, UnknownChordQuality
from chordtrainer.theory.formulas import list_qualities


def _same_notes(a, b) -> bool:
    return Counter(a) == Counter(b)


class SpellingPolicyTests(unittest.TestCase):
    def test_flat_roots(self) -> None:
        for root in ("F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"):
            self.assertTrue(prefers_flats(root, "major"), root)

    def test_minor_family_on_c_g_d(self) -> None:
        self.assertTrue(prefers_flats("C", "minor"))
        self.assertTrue(prefers_flats("G", "dim7"))
        self.assertTrue(prefers_flats("D", "min7b5"))
        self.assertTrue(prefers_flats("C", "diminished"))

    def test_sharps_otherwise(self) -> None:
        self.assertFalse(prefers_flats("C", "major"))
        self.assertFalse(prefers_flats("C", "7"))
        self.assertFalse(prefers_flats("C", "maj7"))
        self.assertFalse(prefers_flats("E", "minor"))
        self.assertFalse(prefers_flats("A", "dim7"))
        self.assertFalse(prefers_flats("F#", "minor"))


class BuildChordTests(unittest.TestCase):
    def test_c_major(self) -> None:
        chord = build_chord("C", "major")
        self.assertEqual(chord.name, "C")
        self.assertEqual([n.name for n in chord.voicing], ["C", "E", "G"])
        self.assertEqual([n.octave for n in chord.voicing], [3, 3, 3])
        freqs = [n.frequency for n in chord.voicing]
        for got, want in zip(freqs, [130.81, 164.81, 196.00]):
            self.assertAlmostEqual(got, want, places=2)
        self.assertEqual(chord.voicing, chord.notes)
        self.assertEqual(chord.pitches, ("C3", "E3", "G3"))

    def test_spelling(self) -> None:
        self.assertEqual(build_chord("C", "min7").note_names, ("C", "Eb", "G", "Bb"))
        self.assertEqual(build_chord("Db", "major").note_names, ("Db", "F", "Ab"))
        self.assertEqual(build_chord("E", "major").note_names, ("E", "G#", "B"))
        self.assertEqual(build_chord("D", "minor").note_names, ("D", "F", "A"))
        self.assertEqual(build_chord("C", "7").note_names, ("C", "E", "G", "A#"))

    def test_extended_notes_go_up_an_octave(self) -> None:
        chord = build_chord("C", "13")
        self.assertEqual(chord.note_names, ("C", "E", "G", "A#", "D", "A"))
        self.assertEqual([n.octave for n in chord.notes], [3, 3, 3, 3, 4, 4])
        self.assertEqual(chord.pitches[-1], "A4")
        self.assertEqual(chord.voicing[-1].frequency, 440.0)

    def test_lengths_and_permutation_for_every_quality(self) -> None:
        for qid in list_qualities():
            for inversion in range(0, 7):
                chord = build_chord("G", qid, inversion=inversion)
                self.assertEqual(len(chord.notes), len(chord.voicing))
                self.assertTrue(_same_notes(chord.notes, chord.voicing), (qid, inversion))
                freqs = [n.frequency for n in chord.voicing]
                self.assertEqual(freqs, sorted(freqs))

    def test_root_position_voicing_is_sorted_formula_order(self) -> None:
        for qid in list_qualities():
            chord = build_chord("A", qid)
            self.assertEqual(chord.voicing, tuple(sorted(chord.notes, key=lambda n: n.frequency)))

    def test_first_inversion(self) -> None:
        chord = build_chord("C", "major", inversion=1)
        self.assertEqual(chord.note_names, ("C", "E", "G"))
        self.assertEqual(chord.pitches, ("E3", "G3", "C4"))
        self.assertAlmostEqual(chord.voicing[-1].frequency, 130.81 * 2, places=2)

    def test_inversion_is_capped(self) -> None:
        root_pos = build_chord("C", "maj7")
        chord = build_chord("C", "maj7", inversion=10)
        self.assertEqual(len(chord.voicing), 4)
        for before, after in zip(root_pos.notes, chord.notes):
            self.assertEqual(after.name, before.name)
            self.assertEqual(after.octave, before.octave + 1)
            self.assertAlmostEqual(after.frequency, before.frequency * 2)

    def test_negative_inversion_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_chord("C", "major", inversion=-1)

    def test_display_order_unaffected_by_inversion(self) -> None:
        for inversion in range(4):
            self.assertEqual(build_chord("F", "maj7", inversion=inversion).note_names, ("F", "A", "C", "E"))

    def test_base_octave(self) -> None:
        chord = build_chord("A", "major", octave=4)
        self.assertEqual(chord.notes[0], Note("A", 4, 440.0))

    def test_failures(self) -> None:
        with self.assertRaises(UnknownChordQuality):
            build_chord("C", "nonsense")
        with self.assertRaises(InvalidPitchClass):
            build_chord("H", "major")
        with self.assertRaises(InvalidOctaveIndex):
            build_chord("C", "major", octave=6)
        with self.assertRaises(InvalidOctaveIndex):
            build_chord("C", "13", octave=5)

    def test_chord_is_immutable(self) -> None:
        chord = build_chord("C", "major")
        with self.assertRaises(AttributeError):
            chord.name = "D"  # type: ignore[misc]


class SlashChordTests(unittest.TestCase):
    def test_c_over_e(self) -> None:
        self.assertEqual(build_slash_chord("C", "major", 1).name, "C/E")

    def test_bass_is_lowest_voiced_note(self) -> None:
        self.assertEqual(build_slash_chord("C", "major", 2).name, "C/G")
        self.assertEqual(build_slash_chord("C", "maj7", 1).name, "Cmaj7/E")
        self.assertEqual(build_slash_chord("C", "maj7", 2).name, "Cmaj7/G")
        self.assertEqual(build_slash_chord("C", "7", 3).name, "C7/A#")
        self.assertEqual(build_slash_chord("F", "maj7", 2).name, "Fmaj7/C")
        self.assertEqual(build_slash_chord("A", "minor", 1).name, "Am/C")

    def test_full_promotion_keeps_root_in_bass(self) -> None:
        self.assertEqual(build_slash_chord("C", "major", 3).name, "C/C")

    def test_notes_match_plain_build(self) -> None:
        slash = build_slash_chord("G", "7", 3)
        plain = build_chord("G", "7", inversion=3)
        self.assertEqual(slash.notes, plain.notes)
        self.assertEqual(slash.voicing, plain.voicing)
        self.assertEqual(slash.bass, slash.voicing[0])

    def test_unknown_quality(self) -> None:
        with self.assertRaises(UnknownChordQuality):
            build_slash_chord("C", "nope", 1)


if __name__ == "__main__":
    unittest.main()
