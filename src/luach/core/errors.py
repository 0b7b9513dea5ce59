class LuachError(Exception):
    """Base error."""

class BeforeEpochError(LuachError, ValueError):
    """Raised when an absolute day precedes 1 Tishrei AM 1."""

class BadMonthError(LuachError, ValueError):
    """Raised when a month number is invalid for the given Hebrew year."""

class InvalidDateError(LuachError, ValueError):
    """Raised on a contract violation: year < 1, day overflow, month out of range."""
