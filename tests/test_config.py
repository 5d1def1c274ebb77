import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from chordtrainer.config.config import load_config, validate_config


def _quiet(fn, *args):
    with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
        return fn(*args)


class ConfigTests(unittest.TestCase):
    def test_package_defaults(self) -> None:
        cfg = load_config()
        self.assertEqual(cfg["session"]["difficulty"], "beginner")
        self.assertEqual(cfg["audio"]["strum_ms"], 50)

    def test_missing_soundfont_falls_back_to_silent(self) -> None:
        cfg = _quiet(validate_config, {"audio": {"backend": "fluidsynth", "soundfont_path": "/nonexistent.sf2"}})
        self.assertEqual(cfg["audio"]["backend"], "none")

    def test_defaults_filled(self) -> None:
        cfg = _quiet(validate_config, {"audio": {"backend": "none"}})
        self.assertEqual(cfg["session"]["time_per_chord_s"], 10)
        self.assertEqual(cfg["session"]["advance_delay_s"], 1)
        self.assertFalse(cfg["session"]["show_notes"])
        self.assertEqual(cfg["audio"]["instrument"], "acoustic")
        self.assertEqual(cfg["audio"]["sustain_ms"], 2000)

    def test_bad_values_replaced(self) -> None:
        raw = {
            "audio": {"backend": "none", "instrument": "kazoo"},
            "session": {"difficulty": "expert", "time_per_chord_s": 100},
        }
        out = io.StringIO()
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            cfg = validate_config(raw)
        self.assertEqual(cfg["audio"]["instrument"], "acoustic")
        self.assertEqual(cfg["session"]["difficulty"], "beginner")
        self.assertEqual(cfg["session"]["time_per_chord_s"], 45)
        self.assertIn("WARNING: Unsupported difficulty 'expert'", out.getvalue())

    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "cfg.yml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("session:\n  difficulty: jazz\n  time_per_chord_s: 5\naudio:\n  backend: none\n")
            cfg = _quiet(validate_config, load_config(path))
        self.assertEqual(cfg["session"]["difficulty"], "jazz")
        self.assertEqual(cfg["session"]["time_per_chord_s"], 5)

    def test_missing_file_exits(self) -> None:
        with self.assertRaises(SystemExit):
            _quiet(load_config, "/nonexistent/chordtrainer.yml")


if __name__ == "__main__":
    unittest.main()
