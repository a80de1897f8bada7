"""
Word validation against a root word and the session's used-word history.

A candidate is checked by three rules, in this order (first failure wins):
  1) original : not accepted already this session
  2) possible : spellable from the root word's letters (multiplicity-aware)
  3) real     : recognized by the dictionary oracle

Empty input (after normalization) is its own outcome; callers ignore it.

Everything here is pure: nothing mutates the root word, the used-word list
or the oracle. `accept` returns a NEW list.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import List, Sequence


class Outcome(str, Enum):
    ACCEPTED = "accepted"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"
    EMPTY = "empty"


def normalize(candidate: str) -> str:
    """Lowercase and trim surrounding whitespace (spaces, tabs, newlines)."""
    return candidate.lower().strip()


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` can be spelled using only the letters of `root_word`,
    each letter instance consumed at most once (order irrelevant).

    Examples:
      is_possible("silk", "silkworm") -> True
      is_possible("sill", "silkworm") -> False   (only one 'l')
    """
    remaining = Counter(root_word)
    for ch in word:
        if remaining[ch] > 0:
            remaining[ch] -= 1  # consume one instance
        else:
            return False
    return True


def classify(candidate: str, root_word: str, used_words: Sequence[str], oracle) -> Outcome:
    """
    Classify a raw candidate against the current session.

    Args:
      candidate  : raw user input (normalized here)
      root_word  : the session's root word (lowercase, non-empty)
      used_words : accepted words so far, newest first
      oracle     : object with is_real(word) -> bool (see packages.dictionary)

    Returns:
      The first failing Outcome, or Outcome.ACCEPTED.

    Note: the root word itself and one-letter words are not rejected.
    """
    word = normalize(candidate)

    if not word:
        return Outcome.EMPTY
    if not is_original(word, used_words):
        return Outcome.ALREADY_USED
    if not is_possible(word, root_word):
        return Outcome.NOT_POSSIBLE
    # Oracle is the only (possibly slow) step; reached only if the cheap rules pass
    if not oracle.is_real(word):
        return Outcome.NOT_REAL
    return Outcome.ACCEPTED


def accept(candidate: str, used_words: Sequence[str]) -> List[str]:
    """Return a new list with the normalized candidate prepended. No re-validation."""
    return [normalize(candidate), *used_words]
