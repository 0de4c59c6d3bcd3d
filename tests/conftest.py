"""Shared fixtures for lexicount tests."""

import pytest

import lexicount

WORDS = ["cat", "dog", "bird"]


@pytest.fixture(scope="session")
def matcher():
    """Compile the default word list once for all tests."""
    return lexicount.compile(WORDS)
