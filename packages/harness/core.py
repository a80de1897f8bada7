"""
Replay harness.

- replay: feed a transcript of candidate words through a fresh session pinned
  to a given root word, one report row per candidate.

UI-agnostic so the same rows back the CLI report, tests, or a notebook.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

from packages.engine import normalize
from packages.game import GameSession


def replay(root_word: str, candidates: Iterable[str], oracle) -> List[Dict]:
    """
    Run every candidate, in order, against `root_word`.

    Args:
        root_word:  the session's root word (normalized here)
        candidates: raw candidate strings, as a player would type them
        oracle:     dictionary oracle (is_real(word) -> bool)

    Returns:
        list of dicts with keys:
            root_word, turn (1-based), candidate (raw), word (normalized), outcome (str),
            title, message (empty strings when there is no feedback),
            used_count (history size after this turn), time_ms (float)
    """
    root = normalize(root_word)
    if not root:
        raise ValueError("root_word must be non-empty")

    session = GameSession(oracle)
    session.start([root])  # single-entry list pins the root word

    rows: List[Dict] = []
    for turn, cand in enumerate(candidates, start=1):
        t0 = time.perf_counter_ns()
        outcome = session.submit(cand)
        t1 = time.perf_counter_ns()

        title, message = session.last_feedback or ("", "")
        rows.append({
            "root_word": root,
            "turn": turn,
            "candidate": cand,
            "word": normalize(cand),
            "outcome": outcome.value,
            "title": title,
            "message": message,
            "used_count": len(session.used_words),
            "time_ms": (t1 - t0) / 1_000_000.0,
        })
    return rows
