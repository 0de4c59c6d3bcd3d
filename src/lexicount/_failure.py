"""Failure-function preprocessing for single-pattern matching."""

from __future__ import annotations

from ._errors import InvalidPatternError


def compute_failure_table(pattern: str) -> tuple[int, ...]:
    """Compute the failure table of ``pattern``.

    ``table[0]`` is -1. For i > 0, ``table[i]`` is the index of the last
    character of the longest proper prefix of ``pattern[:i + 1]`` that is
    also its suffix, or -1 when there is none. So ``-1 <= table[i] < i``.

    Raises:
        InvalidPatternError: ``pattern`` is empty or not a string.
    """
    if not isinstance(pattern, str):
        raise InvalidPatternError(
            f"Pattern must be a string, got {type(pattern).__name__}"
        )
    if not pattern:
        raise InvalidPatternError("Pattern must not be empty")

    length = len(pattern)
    table = [-1] * length
    k = -1
    for i in range(1, length):
        while k >= 0 and pattern[k + 1] != pattern[i]:
            k = table[k]
        if pattern[k + 1] == pattern[i]:
            k += 1
        table[i] = k
    return tuple(table)
