from __future__ import annotations

"""CLI for chordtrainer: inspect the chord engine or run a practice session."""

import argparse
import sys
import time
from typing import Any, Callable, Dict

from .. import __version__
from ..audio.playback import make_synth_from_config
from ..audio.synthesis import Synth
from ..config.config import load_config, validate_config
from ..stats.stats import format_summary
from ..theory.chord import Chord, build_chord, build_slash_chord
from ..theory.curriculum import generate_chord_set, list_tiers, require_tier
from ..theory.errors import TheoryError
from ..util.randomness import make_rng
from .presets import DIFFICULTY_PRESETS
from .session_manager import PlaybackPolicy, PracticeSession


PROMPT = "[p] play  [n] notes  [y] got it  [s] skip  [q] quit > "


def _format_chord(chord: Chord) -> str:
    notes = " ".join(chord.note_names)
    voicing = " ".join(f"{n.pitch}({n.frequency:.2f}Hz)" for n in chord.voicing)
    return f"{chord.name:<14} notes: {notes:<22} voicing: {voicing}"


def _build_ui() -> Dict[str, Any]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


def _present(session: PracticeSession, inform: Callable[[str], None]) -> None:
    chord = session.current
    if chord is None:
        return
    inform(f"\nChord {session.total}: {chord.name}   ({session.time_remaining:.0f}s)")
    if session.show_notes:
        inform("Notes: " + " ".join(session.hint()))


def run_practice(
    session: PracticeSession,
    synth: Synth,
    ui: Dict[str, Callable],
    *,
    policy: PlaybackPolicy | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> Dict[str, Any]:
    """Drive a started session from line-based input until the user quits.

    Wall time spent between prompts, playback included, is fed to the
    countdown. If the chord expired before the answer arrived, the answer
    is dropped and the replacement chord is shown instead; only "q" still
    takes effect.
    """
    ask = ui["ask"]
    inform = ui["inform"]
    _present(session, inform)
    last = clock()
    while session.state == "playing":
        ans = ask(PROMPT).strip().lower()
        now = clock()
        timed_out = session.tick(now - last)
        last = now
        if timed_out:
            inform("Time's up.")
            _present(session, inform)
            if ans != "q":
                continue
        if ans == "q":
            break
        if ans == "p":
            session.play_current(synth, policy)
            continue
        if ans == "n":
            session.toggle_notes()
            if session.show_notes:
                inform("Notes: " + " ".join(session.hint()))
            continue
        if ans == "y":
            session.mark_correct()
            inform("Nice!")
            _present(session, inform)
            continue
        if ans == "s":
            session.skip()
            _present(session, inform)
            continue
        inform(f"Score: {session.score}/{session.total}   ({session.time_remaining:.0f}s left)")
    return session.summary()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="chordtrainer")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    sub = p.add_subparsers(dest="cmd")

    sub.add_parser("list-tiers")

    st = sub.add_parser("show-tier")
    st.add_argument("--difficulty", required=True)

    sc = sub.add_parser("show-chord")
    sc.add_argument("root")
    sc.add_argument("quality")
    sc.add_argument("--inversion", type=int, default=0)
    sc.add_argument("--octave", type=int, default=3)
    sc.add_argument("--slash", action="store_true", help="Label the chord with its bass note")

    rp = sub.add_parser("run")
    rp.add_argument("--config", default=None)
    rp.add_argument("--difficulty", default=None)
    rp.add_argument("--time", dest="time_per_chord", type=int, default=None, help="Seconds per chord (1-45)")
    rp.add_argument("--instrument", default=None)
    rp.add_argument("--seed", type=int, default=None)
    rp.add_argument("--no-audio", action="store_true")
    rp.add_argument("--explain", action="store_true")

    args = p.parse_args(argv)

    if args.version:
        print(f"chordtrainer {__version__}")
        return 0

    if args.cmd == "list-tiers":
        for tier in list_tiers():
            meta = DIFFICULTY_PRESETS[tier]
            print(f"{tier}: {meta['label']} - {meta['description']} | chords: {len(generate_chord_set(tier))}")
        return 0

    try:
        if args.cmd == "show-tier":
            for chord in generate_chord_set(require_tier(args.difficulty)):
                print(_format_chord(chord))
            return 0

        if args.cmd == "show-chord":
            if args.slash:
                chord = build_slash_chord(args.root, args.quality, args.inversion, octave=args.octave)
            else:
                chord = build_chord(args.root, args.quality, octave=args.octave, inversion=args.inversion)
            print(_format_chord(chord))
            return 0
    except TheoryError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.cmd == "run":
        if args.explain:
            from .explain import enable as explain_enable
            explain_enable(True)
        cfg = load_config(args.config)
        cfg.setdefault("audio", {})
        cfg.setdefault("session", {})
        if args.difficulty is not None:
            cfg["session"]["difficulty"] = args.difficulty
        if args.time_per_chord is not None:
            cfg["session"]["time_per_chord_s"] = args.time_per_chord
        if args.instrument is not None:
            cfg["audio"]["instrument"] = args.instrument
        if args.no_audio:
            cfg["audio"]["backend"] = "none"
        cfg = validate_config(cfg)

        sess_cfg = cfg["session"]
        audio_cfg = cfg["audio"]
        session = PracticeSession(
            rng=make_rng(args.seed),
            time_per_chord_s=int(sess_cfg["time_per_chord_s"]),
            advance_delay_s=int(sess_cfg["advance_delay_s"]),
        )
        session.start(sess_cfg["difficulty"])
        if session.state == "error":
            print(f"ERROR: {session.error}", file=sys.stderr)
            return 2
        if sess_cfg.get("show_notes"):
            session.toggle_notes()

        meta = DIFFICULTY_PRESETS[sess_cfg["difficulty"]]
        print(f"Starting {meta['label']} practice ({len(session.pool)} chords, {session.time_per_chord_s}s each).")

        synth = make_synth_from_config(cfg)
        policy = PlaybackPolicy(stagger_ms=int(audio_cfg["strum_ms"]), sustain_ms=int(audio_cfg["sustain_ms"]))
        try:
            summary = run_practice(session, synth, _build_ui(), policy=policy)
        finally:
            synth.close()

        print("\nSession Summary:")
        print(f"Score: {summary['score']}/{summary['total']}")
        print(format_summary(session.stats))
        return 0

    p.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
