"""Data structures for lexicount."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PatternTable:
    word: str                 # as supplied by the caller
    needle: str               # lowercased word actually scanned for
    failure: tuple[int, ...]  # len == len(needle), failure[0] == -1


@dataclass(slots=True, frozen=True)
class Match:
    pattern_index: int
    word: str
    start: int
    end: int    # exclusive


@dataclass(slots=True, frozen=True)
class CountReport:
    """Per-pattern occurrence counts in the original pattern order.

    Duplicate patterns keep one entry each, so this is a sequence of
    ``(word, count)`` pairs rather than a dict.
    """

    entries: tuple[tuple[str, int], ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return (word for word, _ in self.entries)

    def __contains__(self, word: object) -> bool:
        return any(w == word for w, _ in self.entries)

    def __getitem__(self, word: str) -> int:
        for w, count in self.entries:
            if w == word:
                return count
        raise KeyError(word)

    def get(self, word: str, default: int | None = None) -> int | None:
        try:
            return self[word]
        except KeyError:
            return default

    def keys(self) -> list[str]:
        return [word for word, _ in self.entries]

    def values(self) -> list[int]:
        return self.counts()

    def items(self) -> list[tuple[str, int]]:
        return list(self.entries)

    def counts(self) -> list[int]:
        return [count for _, count in self.entries]

    def as_dict(self) -> dict[str, int]:
        """Collapse to a plain dict; duplicates share one key."""
        return dict(self.entries)

    @property
    def total(self) -> int:
        return sum(count for _, count in self.entries)
