from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with the --explain CLI flag; emits one terse line per session
milestone.
"""

import json
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    data = payload or {}
    try:
        line = json.dumps(data, separators=(",", ":"))
    except (TypeError, ValueError):
        print(f"[EXPLAIN] {event}")
        return
    print(f"[EXPLAIN] {event} :: {line}")
