class LitcalError(Exception):
    """Base error."""

class ValidationError(LitcalError, ValueError):
    """Raised for out-of-range month, day or year arguments."""

class UnsupportedYearError(LitcalError, ValueError):
    """Raised when a year lies outside the Gregorian computus range."""

class InvalidDateError(LitcalError, ValueError):
    """Raised for impossible calendar dates (e.g. Feb 30)."""

class TableFormatError(LitcalError):
    """Raised when a propers or type-descriptor table is malformed."""
