"""HTML highlighting and plain-text summaries of match results."""

from __future__ import annotations

import html
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._matcher import WordMatcher
    from ._types import CountReport, Match

DEFAULT_COLORS: tuple[str, ...] = ("yellow", "lightgreen", "lightblue")


def _select_spans(matches: list[Match]) -> list[Match]:
    """Greedy leftmost-longest non-overlapping selection."""
    ordered = sorted(matches, key=lambda m: (m.start, -(m.end - m.start)))
    chosen: list[Match] = []
    last_end = -1
    for m in ordered:
        if m.start >= last_end:
            chosen.append(m)
            last_end = m.end
    return chosen


def highlight_html(
    text: str,
    matcher: WordMatcher,
    colors: Sequence[str] = DEFAULT_COLORS,
) -> str:
    """Return ``text`` as escaped HTML with every match wrapped in a span.

    Each word gets ``colors[pattern_index % len(colors)]``.
    """
    if not colors:
        raise ValueError("colors must not be empty")
    text_lower = text.lower()
    # Offsets come from the lowercased text; keep the original casing only
    # when lowering did not shift them.
    source = text if len(text_lower) == len(text) else text_lower

    parts: list[str] = []
    cursor = 0
    for m in _select_spans(matcher.find(text)):
        parts.append(html.escape(source[cursor:m.start]))
        color = colors[m.pattern_index % len(colors)]
        parts.append(
            f'<span style="background-color: {html.escape(color)};">'
            f"{html.escape(source[m.start:m.end])}</span>"
        )
        cursor = m.end
    parts.append(html.escape(source[cursor:]))
    return "".join(parts)


def format_counts(report: CountReport) -> list[str]:
    """One human-readable line per report entry."""
    return [f"{word} appears {count} times." for word, count in report.items()]
