"""
Word-frequency oracle backed by `wordfreq`.

A word counts as real when its Zipf frequency in the chosen language reaches
`min_zipf` (1.0 = about once per billion words), or when it is listed in
`extra_words`. The language tag must be one wordfreq ships a wordlist for;
anything else is rejected with ValueError when the oracle is built.
"""

from __future__ import annotations

from typing import Iterable

from wordfreq import available_languages, zipf_frequency

from .base import BaseOracle, register


@register
class WordfreqOracle(BaseOracle):
    id = "wordfreq"
    name = "wordfreq Zipf threshold"

    def __init__(self, language: str = "en", min_zipf: float = 1.0,
                 extra_words: Iterable[str] = ()):
        supported = available_languages()
        if language not in supported:
            raise ValueError(
                f"Unsupported language for wordfreq: {language}. Available: {sorted(supported)}")
        super().__init__(language=language)
        self.min_zipf = float(min_zipf)
        self.extra_words = {w.strip().lower() for w in extra_words if w.strip()}

    def is_real(self, word: str) -> bool:
        w = word.strip().lower()
        if not w:
            return False
        if w in self.extra_words:
            return True
        return zipf_frequency(w, self.language) >= self.min_zipf
