import random
import pytest
from pathlib import Path
from packages.dictionary import create_oracle
from packages.engine import Outcome
from packages.game import (FALLBACK_ROOT_WORD, DEFAULT_START_WORDS, GameSession,
                           InitializationError, load_start_words, start_session)

ORACLE = create_oracle("wordlist", words=["silk", "worm", "worms", "milk", "silkworm"])


def test_start_session_empty_list_falls_back():
    assert start_session([]) == FALLBACK_ROOT_WORD == "silkworm"
    assert start_session(["", "  "]) == FALLBACK_ROOT_WORD


def test_start_session_unavailable_list_is_fatal():
    with pytest.raises(InitializationError):
        start_session(None)


def test_start_session_picks_from_list_reproducibly():
    words = ["alphabet", "keyboard", "mountain"]
    picks = {start_session(words, random.Random(s)) for s in range(50)}
    assert picks <= set(words)
    assert len(picks) > 1
    assert start_session(words, random.Random(7)) == start_session(words, random.Random(7))


def test_load_start_words(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\nkeyboard\n", encoding="utf-8")
    assert load_start_words(p) == ["silkworm", "keyboard"]


def test_load_start_words_empty_file_is_not_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("", encoding="utf-8")
    assert load_start_words(p) == []
    assert start_session(load_start_words(p)) == FALLBACK_ROOT_WORD


def test_load_start_words_missing_file_is_fatal(tmp_path: Path):
    with pytest.raises(InitializationError) as exc:
        load_start_words(tmp_path / "missing.txt")
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_load_start_words_unreadable_is_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(InitializationError):
        load_start_words(p)


def test_bundled_start_words_load():
    words = load_start_words(DEFAULT_START_WORDS)
    assert "silkworm" in words
    assert all(w.isalpha() and w.islower() for w in words)


def test_session_lifecycle():
    s = GameSession(ORACLE, start_words=["silkworm"], seed=1)
    assert s.is_active is False
    with pytest.raises(RuntimeError):
        s.submit("silk")

    assert s.start() == "silkworm"
    assert s.is_active and s.used_words == []

    assert s.submit("Silk") is Outcome.ACCEPTED
    assert s.last_feedback is None
    assert s.submit("worms") is Outcome.ACCEPTED
    assert s.used_words == ["worms", "silk"]
    assert s.score == 9

    assert s.submit("silk") is Outcome.ALREADY_USED
    assert s.last_feedback == ("Word used already", "Be more original")
    assert s.submit("sill") is Outcome.NOT_POSSIBLE
    assert s.submit("wrom") is Outcome.NOT_REAL
    assert s.submit("   ") is Outcome.EMPTY
    assert s.last_feedback is None
    assert s.used_words == ["worms", "silk"]


def test_session_used_words_is_a_copy():
    s = GameSession(ORACLE, start_words=["silkworm"])
    s.start()
    s.submit("silk")
    s.used_words.append("junk")
    assert s.used_words == ["silk"]


def test_session_restart_clears_history_and_replaces_root():
    s = GameSession(ORACLE, start_words=["silkworm"])
    s.start()
    s.submit("silk")
    assert s.start(["keyboard"]) == "keyboard"
    assert s.used_words == [] and s.score == 0
    assert s.submit("silk") is Outcome.NOT_POSSIBLE


def test_session_without_start_words_is_fatal():
    s = GameSession(ORACLE)
    with pytest.raises(InitializationError):
        s.start()
    assert s.is_active is False
