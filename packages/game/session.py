"""
Game session: root word selection and the accepted-word history.

States:
  - NoSession     : root_word is None (initial)
  - SessionActive : root word set, used-word list present

  start()  : NoSession/SessionActive -> SessionActive (new root, history cleared)
  submit() : SessionActive -> SessionActive (history grows on ACCEPTED)

GameSession is a thin holder a front-end observes; every rule lives in
packages.engine and every dictionary decision in the oracle it is given.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional, Sequence

from packages.datasets.io import load_words
from packages.engine import Outcome, classify, accept, feedback, normalize
from packages.engine.feedback import Feedback
from .errors import InitializationError

# Root word used when the start-word list is present but empty.
FALLBACK_ROOT_WORD = "silkworm"

DEFAULT_START_WORDS = Path(__file__).resolve().parent.parent / "datasets" / "data" / "start.txt"


def load_start_words(path: Path | str = DEFAULT_START_WORDS) -> List[str]:
    """
    Load the start-word resource (one word per line, no header).

    Raises InitializationError if the file is missing or unreadable; an
    existing but empty file is fine and yields [].
    """
    try:
        return load_words(path)
    except (OSError, UnicodeDecodeError) as e:
        raise InitializationError(f"Could not load start words from {path}") from e


def start_session(word_list: Optional[Sequence[str]], rng: random.Random | None = None) -> str:
    """
    Pick a root word uniformly at random from `word_list`.

    Blank entries are skipped. An empty list falls back to FALLBACK_ROOT_WORD;
    a missing list (None) means the resource was never loaded and is fatal.
    """
    if word_list is None:
        raise InitializationError("No start-word list available")

    pool = [w for w in (normalize(x) for x in word_list) if w]
    if not pool:
        return FALLBACK_ROOT_WORD

    rng = rng or random.Random()
    return pool[rng.randrange(len(pool))]


class GameSession:
    def __init__(self, oracle, *, start_words: Optional[Sequence[str]] = None,
                 seed: int | None = None):
        self.oracle = oracle
        self.start_words = start_words
        self.rng = random.Random(seed)

        self.root_word: Optional[str] = None
        self._used_words: List[str] = []
        self.last_feedback: Optional[Feedback] = None

    @property
    def is_active(self) -> bool:
        return self.root_word is not None

    @property
    def used_words(self) -> List[str]:
        """Accepted words, newest first (a copy)."""
        return list(self._used_words)

    @property
    def score(self) -> int:
        """Total letters across accepted words."""
        return sum(len(w) for w in self._used_words)

    def start(self, word_list: Optional[Sequence[str]] = None) -> str:
        """Begin (or restart) a session; clears history and picks a new root word."""
        if word_list is not None:
            self.start_words = word_list
        self.root_word = start_session(self.start_words, self.rng)
        self._used_words = []
        self.last_feedback = None
        return self.root_word

    def submit(self, candidate: str) -> Outcome:
        """
        Validate a candidate and record it if accepted.

        last_feedback holds the (title, message) of a rejection, else None.
        """
        if self.root_word is None:
            raise RuntimeError("No active session; call start() first")

        outcome = classify(candidate, self.root_word, self._used_words, self.oracle)
        self.last_feedback = feedback(outcome, candidate, self.root_word)
        if outcome is Outcome.ACCEPTED:
            self._used_words = accept(candidate, self._used_words)
        return outcome
