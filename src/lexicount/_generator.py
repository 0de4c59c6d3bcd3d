"""Random filler text assembled from a word list."""

from __future__ import annotations

import random
from collections.abc import Sequence

from ._errors import LexicountError


class TextGenerator:
    __slots__ = ("_words", "_separator", "_rng")

    def __init__(
        self,
        words: Sequence[str],
        *,
        seed: int | None = None,
        separator: str = "",
    ) -> None:
        if not words:
            raise LexicountError("TextGenerator needs at least one word")
        self._words = list(words)
        self._separator = separator
        self._rng = random.Random(seed)

    def generate(self, length: int = 50) -> str:
        """Join ``length`` words drawn uniformly at random, with replacement."""
        if length < 0:
            raise LexicountError(f"length must be >= 0, got {length}")
        picks = [self._rng.choice(self._words) for _ in range(length)]
        return self._separator.join(picks)
