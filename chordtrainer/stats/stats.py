from __future__ import annotations

"""In-memory session score tally and formatting."""

from typing import Dict


def new_session_stats() -> Dict:
    """Create a new, empty stats structure."""
    return {"total": 0, "correct": 0, "per_chord": {}}


def update_stats(stats: Dict, chord_name: str, correct: bool) -> None:
    """Update stats for a single presented chord."""
    stats["total"] = int(stats.get("total", 0)) + 1
    if correct:
        stats["correct"] = int(stats.get("correct", 0)) + 1
    per = stats.setdefault("per_chord", {})
    bucket = per.setdefault(chord_name, {"asked": 0, "correct": 0})
    bucket["asked"] += 1
    bucket["correct"] += 1 if correct else 0


def accuracy(stats: Dict) -> float:
    total = int(stats.get("total", 0))
    if total <= 0:
        return 0.0
    return int(stats.get("correct", 0)) / total


def format_summary(stats: Dict) -> str:
    """Return a human-readable summary of stats, weakest chords first."""
    total = int(stats.get("total", 0))
    correct = int(stats.get("correct", 0))
    lines = [f"Correct: {correct}/{total} ({accuracy(stats):.0%})"]
    per = stats.get("per_chord", {})

    def _key(name: str):
        b = per[name]
        return (b.get("correct", 0) / max(1, b.get("asked", 0)), name)

    for name in sorted(per.keys(), key=_key):
        lines.append(f"{name}: {per[name].get('correct', 0)}/{per[name].get('asked', 0)}")
    return "\n".join(lines)
