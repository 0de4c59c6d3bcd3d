"""Lexicount error types."""


class LexicountError(Exception):
    """Base error for all lexicount failures."""


class InvalidPatternError(LexicountError):
    """Pattern is empty or not a string."""


class LexicountVersionError(LexicountError):
    """Manifest version mismatch."""


class LexicountChecksumError(LexicountError):
    """File checksum verification failed."""
