"""
Core exception types for rational.core.

These are dependency-free and may be imported by all core modules.
Each one also derives from the builtin exception callers would expect
(ValueError, ZeroDivisionError, ...), so plain ``except ValueError``
keeps working.
"""

import decimal

__all__ = [
    "RationalError",
    "FormatError",
    "PrecisionLimitError",
    "DivisionByZero",
    "InvalidOperation",
]


class RationalError(Exception):
    """Base class of all errors raised by rational.core."""
    pass


class FormatError(RationalError, ValueError):
    """Raised when a string is not a valid literal for a Rational."""

    def __init__(self, literal):
        super().__init__(f"Invalid literal for Rational: {literal!r}")
        self.literal = literal


class PrecisionLimitError(RationalError, ValueError):
    """Raised when a precision lies outside [MIN_PREC, MAX_PREC].

    Attributes
    ----------
    precision : int
        The offending precision.
    """

    def __init__(self, precision):
        super().__init__(f"Precision limit exceeded: {precision}")
        self.precision = precision


class DivisionByZero(RationalError, ZeroDivisionError):
    """Raised when a ratio with zero denominator would be built."""
    pass


class InvalidOperation(RationalError, decimal.InvalidOperation):
    """Raised when ordering against a NaN-valued decimal operand."""
    pass
