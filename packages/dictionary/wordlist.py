"""
Static word-list oracle.

A word is real iff it appears in a fixed set, given directly or loaded from a
newline-separated file. Entries are lowercased and trimmed on load; blank
lines are ignored. Handy for tests and for offline play with a curated list.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Set

from packages.datasets.io import read_lines
from .base import BaseOracle, register


@register
class WordListOracle(BaseOracle):
    id = "wordlist"
    name = "Static word list"

    def __init__(self, words: Iterable[str] | None = None, path: Path | str | None = None,
                 language: str = "en"):
        super().__init__(language=language)
        self.words: Set[str] = {w.strip().lower() for w in (words or ()) if w.strip()}
        if path is not None:
            self.words.update(w.strip().lower() for w in read_lines(path) if w.strip())

    def is_real(self, word: str) -> bool:
        w = word.strip().lower()
        return bool(w) and w in self.words
