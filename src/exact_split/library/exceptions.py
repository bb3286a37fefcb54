"""
Exceptions that are used throughout the exact-split library.

"""

from __future__ import annotations


class ExactSplitError(Exception):
    """Base exception for exact-split library."""

    pass


class ConfigurationError(ExactSplitError):
    """Raised when configuration is invalid or missing."""

    pass


class AllocationError(ExactSplitError):
    """
    Raised when an allocation cannot be computed.

    Also raised directly when an internal invariant of the allocation
    algorithm is broken (e.g. the initial distribution overshoots the amount).
    """

    pass


class InvalidRecipientCount(AllocationError, ValueError):
    """Raised when the number of recipients is not a positive integer."""

    pass


class UnsupportedScale(AllocationError, ValueError):
    """
    Raised when a scale cannot be represented.

    Scales must be non-negative and no larger than the configured maximum
    number of fractional digits.
    """

    pass


class ArithmeticOverflow(AllocationError, OverflowError):
    """
    Raised when a mantissa leaves the supported signed integer range.

    Python integers never wrap, so the range is checked explicitly against
    the configured mantissa width (128 bits by default).
    """

    pass


class NegativeAmountUnsupported(AllocationError, ValueError):
    """Raised when a negative amount is passed to the allocator."""

    pass


class ValidationError(ExactSplitError):
    """Base exception for validation errors."""

    pass


class OutputValidationError(ValidationError):
    """
    Raised when output validation fails.

    Output validation includes checking that the number of shares matches the
    number of recipients and that the share mantissas sum to the split amount.
    """

    pass
