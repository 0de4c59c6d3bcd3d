"""Lexicount: case-insensitive occurrence counting for a fixed set of words."""

from __future__ import annotations

from ._errors import (
    InvalidPatternError,
    LexicountChecksumError,
    LexicountError,
    LexicountVersionError,
)
from ._failure import compute_failure_table
from ._generator import TextGenerator
from ._loader import load_matcher, save_matcher
from ._matcher import WordMatcher, count_all
from ._render import DEFAULT_COLORS, format_counts, highlight_html
from ._types import CountReport, Match, PatternTable

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "compile",
    "count_all",
    "compute_failure_table",
    "format_counts",
    "highlight_html",
    "load_matcher",
    "save_matcher",
    "CountReport",
    "DEFAULT_COLORS",
    "InvalidPatternError",
    "LexicountChecksumError",
    "LexicountError",
    "LexicountVersionError",
    "Match",
    "PatternTable",
    "TextGenerator",
    "WordMatcher",
]


def compile(words: list[str]) -> WordMatcher:
    """Preprocess ``words`` and return a reusable WordMatcher."""
    return WordMatcher(words)
