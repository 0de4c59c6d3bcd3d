"""Tests for matcher persistence and validation."""

import json
from pathlib import Path

import msgpack
import pytest

from lexicount import WordMatcher
from lexicount._errors import LexicountChecksumError, LexicountError, LexicountVersionError
from lexicount._loader import _digest, load_matcher, save_matcher


@pytest.fixture
def saved_dir(tmp_path, matcher):
    return save_matcher(matcher, tmp_path / "matcher")


def test_round_trip_preserves_tables(saved_dir, matcher):
    loaded = load_matcher(saved_dir)
    assert loaded.words == matcher.words
    assert loaded.patterns == matcher.patterns


def test_loaded_matcher_counts(saved_dir):
    loaded = load_matcher(saved_dir)
    assert loaded.count("cat dog catbird").as_dict() == {"cat": 2, "dog": 1, "bird": 1}


def test_manifest_written(saved_dir):
    with open(saved_dir / "manifest.json") as f:
        manifest = json.load(f)
    assert manifest["version"] == "1.0"
    assert manifest["files"]["patterns.bin"] == _digest((saved_dir / "patterns.bin").read_bytes())


def test_original_casing_survives(tmp_path):
    out = save_matcher(WordMatcher(["Fox", "fox"]), tmp_path)
    loaded = load_matcher(out)
    assert loaded.words == ("Fox", "fox")
    assert loaded.count("FOX").items() == [("Fox", 1), ("fox", 1)]


def test_missing_directory():
    with pytest.raises(LexicountError, match="manifest.json not found"):
        load_matcher("/nonexistent/path")


def test_missing_data_file(saved_dir):
    (saved_dir / "patterns.bin").unlink()
    with pytest.raises(LexicountError, match="Missing data file"):
        load_matcher(saved_dir)


def test_version_mismatch(saved_dir):
    """Tampered version should raise LexicountVersionError."""
    manifest_path = Path(saved_dir) / "manifest.json"
    with open(manifest_path) as f:
        manifest = json.load(f)
    manifest["version"] = "99.0"
    with open(manifest_path, "w") as f:
        json.dump(manifest, f)
    with pytest.raises(LexicountVersionError):
        load_matcher(saved_dir)


def test_checksum_mismatch(saved_dir):
    """Tampered file should raise LexicountChecksumError."""
    with open(saved_dir / "patterns.bin", "ab") as f:
        f.write(b"tampered")
    with pytest.raises(LexicountChecksumError):
        load_matcher(saved_dir)


def _write_saved(directory, payload):
    """Write ``payload`` as a saved matcher with a matching checksum."""
    blob = msgpack.packb(payload, use_bin_type=True)
    (directory / "patterns.bin").write_bytes(blob)
    with open(directory / "manifest.json", "w") as f:
        json.dump({"version": "1.0", "files": {"patterns.bin": _digest(blob)}}, f)
    return directory


@pytest.mark.parametrize("word, failure", [
    ("cat", [-1, -1]),       # wrong length
    ("aa", [-1, -1]),        # misses the overlap, would undercount
    ("ab", [-1, 5]),         # points past the pattern
    ("abc", [-1, 1, -1]),    # points forward, would never terminate
    ("abc", [0, -1, -1]),    # missing sentinel
])
def test_corrupt_table(tmp_path, word, failure):
    """A table that does not fit its word is rejected even with a valid checksum."""
    _write_saved(tmp_path, [[word, failure]])
    with pytest.raises(LexicountError, match="Corrupt failure table"):
        load_matcher(tmp_path)


@pytest.mark.parametrize("payload", [
    [["cat"]],
    [["cat", [-1, -1, -1], "extra"]],
    [[42, [-1, -1]]],
    [["", []]],
    [["cat", "abc"]],
    ["cat"],
    {"cat": [-1, -1, -1]},
])
def test_malformed_entries(tmp_path, payload):
    _write_saved(tmp_path, payload)
    with pytest.raises(LexicountError):
        load_matcher(tmp_path)


def test_valid_overlapping_table_loads(tmp_path):
    """A correct self-overlapping table keeps overlap counting after load."""
    _write_saved(tmp_path, [["aa", [-1, 0]]])
    loaded = load_matcher(tmp_path)
    assert loaded.count("aaaa")["aa"] == 3


def test_undecodable_patterns_file(tmp_path):
    blob = b"\xc1"  # reserved msgpack byte
    (tmp_path / "patterns.bin").write_bytes(blob)
    with open(tmp_path / "manifest.json", "w") as f:
        json.dump({"version": "1.0", "files": {"patterns.bin": _digest(blob)}}, f)
    with pytest.raises(LexicountError, match="Cannot decode"):
        load_matcher(tmp_path)
