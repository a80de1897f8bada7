"""
Remote dictionary oracle (free dictionary HTTP API).

GET {base_url}/{language}/{word}
  - 200 -> the word has at least one entry (real)
  - 404 -> no entry (not real)
  - anything else -> requests.HTTPError, so outages are never mistaken
    for "not a word"

The call is synchronous; the caller (and the user) waits until it resolves.
Answers are cached per instance, so re-submitting a word costs no request.
"""

from __future__ import annotations

from typing import Dict
from urllib.parse import quote

import requests

from .base import BaseOracle, register

DEFAULT_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries"


@register
class RemoteOracle(BaseOracle):
    id = "remote"
    name = "Free Dictionary API"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, language: str = "en",
                 timeout: float = 10.0, session: requests.Session | None = None):
        super().__init__(language=language)
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self._cache: Dict[str, bool] = {}

    def _url(self, word: str) -> str:
        return f"{self.base_url}/{quote(self.language)}/{quote(word)}"

    def is_real(self, word: str) -> bool:
        w = word.strip().lower()
        if not w:
            return False
        if w in self._cache:
            return self._cache[w]

        r = self.session.get(self._url(w), timeout=self.timeout)
        if r.status_code == 404:
            found = False
        else:
            r.raise_for_status()
            found = True

        self._cache[w] = found
        return found
