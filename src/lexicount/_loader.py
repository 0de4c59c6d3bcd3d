"""Saving and loading preprocessed matchers."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._errors import LexicountChecksumError, LexicountError, LexicountVersionError
from ._failure import compute_failure_table
from ._matcher import WordMatcher
from ._types import PatternTable

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"

_PATTERNS_FILE = "patterns.bin"
_MANIFEST_FILE = "manifest.json"


def _digest(blob: bytes) -> str:
    return hashlib.sha256(blob).hexdigest()


def _check_manifest(manifest: dict[str, Any], blob: bytes) -> None:
    if manifest.get("version") != FORMAT_VERSION:
        raise LexicountVersionError(
            f"Unsupported matcher format {manifest.get('version')!r}, "
            f"expected {FORMAT_VERSION!r}"
        )
    expected = manifest.get("files", {}).get(_PATTERNS_FILE)
    if expected is None:
        raise LexicountError(f"Manifest lists no checksum for {_PATTERNS_FILE}")
    if _digest(blob) != expected:
        raise LexicountChecksumError(f"{_PATTERNS_FILE} does not match its manifest checksum")


def _table_from_entry(entry: Any) -> PatternTable:
    """Rebuild one PatternTable, rejecting tables that do not fit their word.

    A table is only accepted if it equals the one computed from its word, so
    a loaded matcher scans exactly like a freshly compiled one.
    """
    if not isinstance(entry, list) or len(entry) != 2:
        raise LexicountError(f"Malformed pattern entry: {entry!r}")
    word, failure = entry
    if not isinstance(word, str) or not word or not isinstance(failure, list):
        raise LexicountError(f"Malformed pattern entry: {entry!r}")
    needle = word.lower()
    table = compute_failure_table(needle)
    if tuple(failure) != table:
        raise LexicountError(f"Corrupt failure table for pattern {word!r}")
    return PatternTable(word=word, needle=needle, failure=table)


def save_matcher(matcher: WordMatcher, out_dir: Path | str) -> Path:
    """Write the matcher's patterns and failure tables to ``out_dir``.

    Returns the directory written to.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    payload = [[t.word, list(t.failure)] for t in matcher.patterns]
    blob = msgpack.packb(payload, use_bin_type=True)
    (out_dir / _PATTERNS_FILE).write_bytes(blob)

    manifest = {"version": FORMAT_VERSION, "files": {_PATTERNS_FILE: _digest(blob)}}
    with open(out_dir / _MANIFEST_FILE, "w") as f:
        json.dump(manifest, f, indent=2)

    logger.debug("Saved %d pattern(s) to %s", len(payload), out_dir)
    return out_dir


def load_matcher(data_dir: Path | str) -> WordMatcher:
    """Load a matcher written by ``save_matcher``.

    Raises:
        LexicountError: a file is missing, or a stored entry or table is
            malformed.
        LexicountVersionError: the manifest has a different format version.
        LexicountChecksumError: ``patterns.bin`` was modified after saving.
    """
    data_dir = Path(data_dir)
    manifest_path = data_dir / _MANIFEST_FILE
    patterns_path = data_dir / _PATTERNS_FILE
    if not manifest_path.exists():
        raise LexicountError(f"{_MANIFEST_FILE} not found in {data_dir}")
    if not patterns_path.exists():
        raise LexicountError(f"Missing data file: {patterns_path}")

    with open(manifest_path) as f:
        manifest = json.load(f)
    blob = patterns_path.read_bytes()
    _check_manifest(manifest, blob)

    try:
        raw = msgpack.unpackb(blob, raw=False)
    except ValueError as exc:
        raise LexicountError(f"Cannot decode {_PATTERNS_FILE}: {exc}") from exc
    if not isinstance(raw, list):
        raise LexicountError(f"{_PATTERNS_FILE} must hold a list of patterns")

    tables = [_table_from_entry(entry) for entry in raw]
    logger.debug("Loaded %d pattern(s) from %s", len(tables), data_dir)
    return WordMatcher._from_tables(tables)
