# wordset.py
# Fixed-length word collection loaded from a word list (one word per line).

import mmap
import time
from typing import Iterable, Iterator, Optional

import requests

from errors import EmptySet, InconsistentLength, InvalidEncoding
from utils import ALPHABET, vlog


class WordSet:
    """
    Deduplicated set of words that all share the same length.

      - WordSet.build(words) -> WordSet
      - word in wordset      -> bool (hashed lookup)
      - wordset.length       -> common word length L

    Words are owned ``str`` objects, so a WordSet never depends on the buffer
    it was parsed from staying alive.
    """

    __slots__ = ("_words", "length")

    def __init__(self, words: frozenset, length: int):
        self._words = words
        self.length = length

    @classmethod
    def build(cls, words: Iterable[str], alphabet: str = ALPHABET, source: str = "input") -> "WordSet":
        """Validate ``words`` and return a WordSet. Empty strings are skipped."""
        allowed = set(alphabet)
        seen = set()
        length: Optional[int] = None
        for w in words:
            if not w:
                continue
            if any(ch not in allowed for ch in w):
                raise InvalidEncoding(w)
            if length is None:
                length = len(w)
            elif len(w) != length:
                raise InconsistentLength(w, length)
            seen.add(w)
        if length is None:
            raise EmptySet(source)
        return cls(frozenset(seen), length)

    def __contains__(self, word) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordSet({len(self._words)} words of length {self.length})"


def _split_words(data: bytes) -> Iterator[str]:
    for raw in data.split(b"\n"):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        if not raw:
            continue
        try:
            word = raw.decode("ascii")
        except UnicodeDecodeError:
            raise InvalidEncoding(raw.decode("utf-8", errors="replace")) from None
        yield word


def load_words(data: bytes, alphabet: str = ALPHABET, source: str = "input") -> WordSet:
    """Parse raw word-list bytes into a WordSet."""
    return WordSet.build(_split_words(data), alphabet=alphabet, source=source)


def read_words(path, alphabet: str = ALPHABET) -> WordSet:
    """Load a word list file through a read-only memory map."""
    t0 = time.time()
    with open(path, "rb") as f:
        try:
            view = mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)
        except ValueError:
            # zero-length files cannot be mapped
            data = f.read()
        else:
            with view:
                data = view[:]
    wordset = load_words(data, alphabet=alphabet, source=str(path))
    vlog(f"Word list {path} loaded ({len(wordset)} words)", t0)
    return wordset


def fetch_words(url: str, alphabet: str = ALPHABET, timeout: float = 30) -> WordSet:
    """Download a word list and load it."""
    t0 = time.time()
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    wordset = load_words(resp.content, alphabet=alphabet, source=url)
    vlog(f"Word list downloaded from {url} ({len(wordset)} words)", t0)
    return wordset


def is_url(source) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def open_words(source, alphabet: str = ALPHABET) -> WordSet:
    if is_url(source):
        return fetch_words(source, alphabet=alphabet)
    return read_words(source, alphabet=alphabet)
