"""
User-facing (title, message) pairs for each rejection outcome.

EMPTY and ACCEPTED produce no feedback (None); front-ends show nothing.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .rules import Outcome, normalize

Feedback = Tuple[str, str]  # (title, message)


def feedback(outcome: Outcome, word: str, root_word: str) -> Optional[Feedback]:
    word = normalize(word)
    if outcome is Outcome.ALREADY_USED:
        return "Word used already", "Be more original"
    if outcome is Outcome.NOT_POSSIBLE:
        return "Word not possible", f"You cannot spell {word} from {root_word}"
    if outcome is Outcome.NOT_REAL:
        return "Word not recognized", f"{word} is not a part of the english dictionary"
    return None
