import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

import wordset
from wordset import WordSet, load_words, read_words, fetch_words, open_words
from errors import EmptySet, InconsistentLength, InvalidEncoding


def test_load_words_basic():
    ws = load_words(b"cat\ncot\ndog\n")
    assert len(ws) == 3
    assert ws.length == 3
    assert "cot" in ws
    assert "cog" not in ws


def test_load_words_skips_empty_lines_and_duplicates():
    ws = load_words(b"\ncat\n\ncat\ncot\n\n\n")
    assert sorted(ws) == ["cat", "cot"]


def test_load_words_accepts_crlf():
    ws = load_words(b"cat\r\ncot\r\n")
    assert sorted(ws) == ["cat", "cot"]


def test_inconsistent_length_names_word():
    with pytest.raises(InconsistentLength) as exc:
        load_words(b"cat\ncot\ndogs\n")
    assert exc.value.word == "dogs"
    assert exc.value.expected == 3
    assert "dogs" in str(exc.value)


def test_invalid_encoding_non_ascii():
    with pytest.raises(InvalidEncoding):
        load_words("cat\ncafé\n".encode("utf-8"))


def test_invalid_encoding_outside_alphabet():
    with pytest.raises(InvalidEncoding) as exc:
        load_words(b"cat\nCOT\n")
    assert exc.value.word == "COT"


def test_empty_set():
    with pytest.raises(EmptySet):
        load_words(b"\n\n")
    with pytest.raises(EmptySet):
        load_words(b"")


def test_custom_alphabet():
    ws = load_words(b"12\n13\n", alphabet="0123456789")
    assert "13" in ws
    with pytest.raises(InvalidEncoding):
        load_words(b"12\nab\n", alphabet="0123456789")


def test_build_from_strings():
    ws = WordSet.build(["dog", "", "dot"])
    assert ws.length == 3
    assert set(ws) == {"dog", "dot"}


def test_read_words_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"cat\ncot\ncog\n")
    ws = read_words(path)
    assert set(ws) == {"cat", "cot", "cog"}


def test_read_words_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    with pytest.raises(EmptySet):
        read_words(path)


def test_read_words_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_words(tmp_path / "nope.txt")


class DummyResponse:
    def __init__(self, content, status=200):
        self.content = content
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise wordset.requests.HTTPError(f"{self.status} error")


def test_fetch_words(monkeypatch):
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return DummyResponse(b"cat\ncot\n")

    monkeypatch.setattr(wordset.requests, "get", fake_get)
    ws = open_words("https://example.com/words.txt")
    assert calls == ["https://example.com/words.txt"]
    assert set(ws) == {"cat", "cot"}


def test_fetch_words_http_error(monkeypatch):
    monkeypatch.setattr(wordset.requests, "get", lambda url, timeout=None: DummyResponse(b"", 404))
    with pytest.raises(wordset.requests.HTTPError):
        fetch_words("https://example.com/missing.txt")
