"""Inverted index stored in a hash table with separate chaining."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence

from .words import TermEntry

TABLE_SIZE = 223
MAX_WORD_LENGTH = 50
ALPHABET_SIZE = 256
MIN_WEIGHT = 1
MAX_WEIGHT = 10_000

Weights = Sequence[Sequence[int]]


def generate_weights(rng: random.Random | None = None) -> tuple[tuple[int, ...], ...]:
    """Draw a universal-hashing weight table with values in 1..10000.

    The table has one row per character position and one column per
    character code.  Without ``rng`` a time-seeded generator is used.
    """
    rng = rng if rng is not None else random.Random()
    return tuple(
        tuple(rng.randint(MIN_WEIGHT, MAX_WEIGHT) for _ in range(ALPHABET_SIZE))
        for _ in range(MAX_WORD_LENGTH)
    )


def hash_word(word: str, weights: Weights) -> int:
    """Return the bucket index of ``word`` for the given weight table."""
    if len(word) > len(weights):
        raise ValueError(f"word longer than {len(weights)} characters: {word!r}")
    total = 0
    for row, char in zip(weights, word):
        code = ord(char)
        if code >= len(row):
            raise ValueError(f"character {char!r} outside the hash alphabet")
        total += row[code]
    return total % TABLE_SIZE


class HashIndex:
    """Inverted index keyed by word, with comparison counters."""

    def __init__(self, weights: Weights | None = None, *, rng: random.Random | None = None):
        self.weights = weights if weights is not None else generate_weights(rng)
        self._buckets: list[list[TermEntry]] = [[] for _ in range(TABLE_SIZE)]
        self.insert_comparisons = 0
        self.search_comparisons = 0

    def _find(self, word: str) -> tuple[list[TermEntry], TermEntry | None, int]:
        bucket = self._buckets[hash_word(word, self.weights)]
        comparisons = 0
        for entry in bucket:
            comparisons += 1
            if entry.word == word:
                return bucket, entry, comparisons
        return bucket, None, comparisons

    def insert(self, word: str, doc_id: int) -> TermEntry:
        """Record one occurrence of ``word`` in ``doc_id``; return its entry."""
        bucket, entry, comparisons = self._find(word)
        self.insert_comparisons += comparisons
        if entry is None:
            entry = TermEntry(word)
            bucket.append(entry)
        entry.add(doc_id)
        return entry

    def search(self, word: str) -> TermEntry | None:
        """Return the entry for ``word``, or None if it is not indexed."""
        _, entry, comparisons = self._find(word)
        self.search_comparisons += comparisons
        return entry

    def __iter__(self) -> Iterator[TermEntry]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word)[1] is not None

    def distinct_terms(self, doc_id: int) -> int:
        """Number of distinct indexed terms that occur in ``doc_id``."""
        return sum(1 for entry in self if entry.count_in(doc_id) > 0)

    def entries(self) -> list[TermEntry]:
        """All entries in alphabetical order of their words."""
        return sorted(self, key=lambda entry: entry.word)

    def format(self) -> str:
        """Render the whole index alphabetically, one term per line."""
        entries = self.entries()
        if not entries:
            return "Dicionário está vazio.\n"
        lines = ["--- Indice Invertido da Hash ---"]
        lines.extend(entry.format() for entry in entries)
        return "\n".join(lines) + "\n"