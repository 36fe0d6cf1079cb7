from __future__ import annotations


class WindsortError(Exception):
    """Base class for everything windsort raises on purpose."""


class ConfigurationError(WindsortError, ValueError):
    """Bad pattern, bad sort order or unreadable config. Raised at startup only."""


class MatchInvariantViolation(WindsortError, RuntimeError):
    """Spans came out overlapping or unordered. The affected file must be left untouched."""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset
