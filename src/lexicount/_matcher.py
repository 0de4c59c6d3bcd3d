"""WordMatcher: per-word failure-table scan with overlap reset."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ._failure import compute_failure_table
from ._types import CountReport, Match, PatternTable

logger = logging.getLogger(__name__)


def _scan(table: PatternTable, text_lower: str) -> Iterator[int]:
    """Yield the index of the last character of every occurrence.

    After a full match the cursor falls back through the failure table
    instead of restarting, so self-overlapping occurrences are all found
    ("aa" occurs 3 times in "aaaa").
    """
    needle = table.needle
    failure = table.failure
    last = len(needle) - 1
    pos = -1
    for j, ch in enumerate(text_lower):
        while pos >= 0 and needle[pos + 1] != ch:
            pos = failure[pos]
        if needle[pos + 1] == ch:
            pos += 1
        if pos == last:
            yield j
            pos = failure[pos]


def _build_table(word: str) -> PatternTable:
    needle = word.lower() if isinstance(word, str) else word
    return PatternTable(
        word=word, needle=needle, failure=compute_failure_table(needle),
    )


class WordMatcher:
    """Counts a fixed list of words in any number of texts.

    All patterns are preprocessed once at construction; the matcher holds no
    per-scan state and can be reused or shared freely.
    """

    __slots__ = ("_tables",)

    def __init__(self, words: Iterable[str]) -> None:
        # Build every table before returning so a bad pattern fails fast.
        self._tables: tuple[PatternTable, ...] = tuple(
            _build_table(w) for w in words
        )
        logger.debug("Preprocessed %d pattern(s)", len(self._tables))

    @classmethod
    def _from_tables(cls, tables: Iterable[PatternTable]) -> WordMatcher:
        """Rebuild a matcher from already computed tables."""
        matcher = cls.__new__(cls)
        matcher._tables = tuple(tables)
        return matcher

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"WordMatcher({list(self.words)!r})"

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(t.word for t in self._tables)

    @property
    def patterns(self) -> tuple[PatternTable, ...]:
        return self._tables

    # -- Public matching API --

    def count(self, text: str) -> CountReport:
        """Count occurrences of every word in ``text``, case-insensitively."""
        text_lower = text.lower()
        entries = []
        for table in self._tables:
            n = 0
            for _ in _scan(table, text_lower):
                n += 1
            entries.append((table.word, n))
        return CountReport(entries=tuple(entries))

    def count_batch(self, texts: Iterable[str]) -> list[CountReport]:
        """Count words in multiple texts."""
        return [self.count(t) for t in texts]

    def find(self, text: str) -> list[Match]:
        """Return every occurrence of every word, ordered by start offset.

        Offsets refer to ``text.lower()``. Each word contributes exactly as
        many matches as ``count`` reports for it.
        """
        text_lower = text.lower()
        matches: list[Match] = []
        for idx, table in enumerate(self._tables):
            width = len(table.needle)
            for end_inclusive in _scan(table, text_lower):
                end = end_inclusive + 1
                matches.append(Match(
                    pattern_index=idx, word=table.word,
                    start=end - width, end=end,
                ))
        matches.sort(key=lambda m: (m.start, m.pattern_index))
        return matches


def count_all(words: Iterable[str], text: str) -> CountReport:
    """Count occurrences of each of ``words`` in ``text``.

    Raises:
        InvalidPatternError: any word is empty.
    """
    return WordMatcher(words).count(text)
