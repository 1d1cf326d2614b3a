"""A hash-table dictionary of words with case-insensitive lookup."""

from __future__ import annotations

import os
from collections.abc import Iterator

LENGTH = 45
"""Maximum length of a word."""

N = 26
"""Number of buckets in the hash table."""

_MASK = 0xFFFFFFFF


def _ascii_upper(ch: str) -> int:
    code = ord(ch)
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code


def _ascii_lower(word: str) -> str:
    return "".join(
        chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in word
    )


def hash_word(word: str) -> int:
    """Hash a word case-insensitively into a bucket number in range(N)."""
    value = 5381
    for ch in word:
        value = (value * 33 + _ascii_upper(ch)) & _MASK
    return value % N


def _tokens(text: str) -> Iterator[str]:
    """Split text on whitespace into pieces at most LENGTH characters long."""
    for token in text.split():
        for start in range(0, len(token), LENGTH):
            yield token[start:start + LENGTH]


class Dictionary:
    """Words loaded from a file, checked without regard to ASCII case."""

    def __init__(self) -> None:
        self._buckets: list[set[str]] = [set() for _ in range(N)]
        self._count = 0

    def load(self, path: str | os.PathLike[str]) -> bool:
        """Load whitespace-separated words from a file.

        Raises OSError if the file cannot be read.
        """
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        self._buckets = [set() for _ in range(N)]
        self._count = 0
        for word in _tokens(text):
            self._buckets[hash_word(word)].add(_ascii_lower(word))
            self._count += 1
        return True

    def check(self, word: str) -> bool:
        """Return True if the word is in the dictionary."""
        return _ascii_lower(word) in self._buckets[hash_word(word)]

    def size(self) -> int:
        """Return the number of words loaded, or 0 if none are."""
        return self._count

    def unload(self) -> bool:
        """Release every loaded word."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0
        return True

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.check(word)

    def __len__(self) -> int:
        return self._count

    def __enter__(self) -> Dictionary:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unload()