import pytest
import requests
from pathlib import Path
from argparse import Namespace
from packages.dictionary import (create_oracle, get_oracle_ids, oracle_from_args, REGISTRY,
                                 register, BaseOracle)
from packages.dictionary.remote import RemoteOracle


class _FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class _FakeSession:
    def __init__(self, statuses):
        self.statuses = statuses  # word -> status code
        self.urls = []

    def get(self, url, timeout=None):
        self.urls.append(url)
        return _FakeResponse(self.statuses[url.rsplit("/", 1)[-1]])


def test_registry_has_builtin_oracles():
    assert {"wordlist", "wordfreq", "remote"} <= set(get_oracle_ids())
    assert get_oracle_ids() == sorted(get_oracle_ids())


def test_create_oracle_unknown_id():
    with pytest.raises(ValueError, match="Unknown oracle id"):
        create_oracle("nope")


def test_register_rejects_duplicates_and_missing_id():
    with pytest.raises(ValueError):
        @register
        class Dup(BaseOracle):
            id = "wordlist"

    with pytest.raises(ValueError):
        @register
        class NoId(BaseOracle):
            id = ""

    assert REGISTRY["wordlist"].__name__ == "WordListOracle"


def test_wordlist_oracle_from_words_and_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Silk\n\n  worm \n", encoding="utf-8")
    oracle = create_oracle("wordlist", words=["milk"], path=p)
    assert oracle.language == "en"
    assert oracle.is_real("silk") and oracle.is_real("WORM") and oracle.is_real("milk")
    assert not oracle.is_real("wrom")
    assert not oracle.is_real("")


def test_wordlist_oracle_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        create_oracle("wordlist", path=tmp_path / "missing.txt")


def test_wordfreq_oracle_clear_cut_words():
    oracle = create_oracle("wordfreq")
    assert oracle.is_real("silk") is True
    assert oracle.is_real("worm") is True
    assert oracle.is_real("qzxvkjw") is False
    assert oracle.is_real("  ") is False


def test_wordfreq_oracle_extra_words():
    oracle = create_oracle("wordfreq", extra_words=["qzxvkjw"])
    assert oracle.is_real("QZXVKJW") is True


def test_remote_oracle_status_mapping_and_cache():
    session = _FakeSession({"silk": 200, "wrom": 404})
    oracle = RemoteOracle(base_url="https://dict.test/api/", session=session)

    assert oracle.is_real("Silk") is True
    assert oracle.is_real("wrom") is False
    assert oracle.is_real("silk") is True  # cached
    assert session.urls == ["https://dict.test/api/en/silk", "https://dict.test/api/en/wrom"]


def test_remote_oracle_raises_on_server_error():
    oracle = RemoteOracle(session=_FakeSession({"silk": 503}))
    with pytest.raises(requests.HTTPError):
        oracle.is_real("silk")


def test_remote_oracle_empty_word_skips_request():
    session = _FakeSession({})
    assert RemoteOracle(session=session).is_real("") is False
    assert session.urls == []


def test_wordfreq_oracle_rejects_unknown_language_up_front():
    with pytest.raises(ValueError, match="Unsupported language"):
        create_oracle("wordfreq", language="xx-notalang")


def test_oracle_from_args():
    args = Namespace(oracle="wordfreq", words=None, lang="en", min_zipf=2.0)
    oracle = oracle_from_args(args)
    assert oracle.id == "wordfreq" and oracle.min_zipf == 2.0

    with pytest.raises(ValueError, match="--words"):
        oracle_from_args(Namespace(oracle="wordlist", words=None, lang="en", min_zipf=1.0))
    with pytest.raises(ValueError, match="Unknown oracle id"):
        oracle_from_args(Namespace(oracle="nope", words=None, lang="en", min_zipf=1.0))
    assert oracle_from_args(Namespace(oracle="remote", words=None, lang="fr",
                                      min_zipf=1.0)).language == "fr"
