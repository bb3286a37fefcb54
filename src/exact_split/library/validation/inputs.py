"""
Input validation functions for the exact-split library.

This module contains the checks applied to allocator inputs before any
arithmetic runs:
- Recipient count (positive integer)
- Scale bounds (non-negative, within fixed-point capacity)
- Mantissa range (signed integer of the configured width)
- Amount sign (negative amounts are not split)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from exact_split.library.error_messages import format_error
from exact_split.library.exceptions import (
    ArithmeticOverflow,
    InvalidRecipientCount,
    NegativeAmountUnsupported,
    UnsupportedScale,
)

if TYPE_CHECKING:
    from exact_split.library.utils.amounts import ScaledAmount

# Largest number of fractional digits a ScaledAmount may carry
MAX_SUPPORTED_SCALE: Final[int] = 28

# Width of the signed integer that holds a mantissa
MAX_MANTISSA_BITS: Final[int] = 128


def _is_strict_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_recipient_count(recipients: object) -> int:
    """
    Validate that the number of recipients is a positive integer.

    Parameters
    ----------
    recipients
        Number of recipients to split among

    Returns
    -------
    int
        The validated recipient count

    Raises
    ------
    InvalidRecipientCount
        If recipients is not an int (bools are rejected) or is <= 0
    """
    if not _is_strict_int(recipients) or recipients <= 0:
        raise InvalidRecipientCount(
            format_error("invalid_recipient_count", recipients=recipients)
        )
    return recipients


def validate_scale(
    scale: object,
    scale_name: str = "scale",
    max_scale: int = MAX_SUPPORTED_SCALE,
) -> int:
    """
    Validate that a scale is a representable number of fractional digits.

    Parameters
    ----------
    scale
        Scale to check
    scale_name
        Name of the parameter for error messages
    max_scale
        Largest accepted scale (default: MAX_SUPPORTED_SCALE)

    Returns
    -------
    int
        The validated scale

    Raises
    ------
    UnsupportedScale
        If scale is not an int, is negative, or exceeds max_scale
    """
    if not _is_strict_int(scale) or not 0 <= scale <= max_scale:
        raise UnsupportedScale(
            format_error(
                "unsupported_scale",
                scale_name=scale_name,
                scale=scale,
                max_scale=max_scale,
            )
        )
    return scale


def mantissa_bounds(bits: int = MAX_MANTISSA_BITS) -> tuple[int, int]:
    """Return the inclusive (minimum, maximum) of a signed ``bits``-bit integer."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def validate_mantissa_range(
    mantissa: object,
    context: str = "mantissa",
    bits: int = MAX_MANTISSA_BITS,
) -> int:
    """
    Validate that a mantissa fits in a signed integer of the given width.

    Parameters
    ----------
    mantissa
        Integer mantissa to check
    context
        Description of where the value came from, for error messages
    bits
        Width of the signed integer (default: 128)

    Returns
    -------
    int
        The validated mantissa

    Raises
    ------
    TypeError
        If mantissa is not an int
    ArithmeticOverflow
        If mantissa lies outside the signed range
    """
    if not _is_strict_int(mantissa):
        raise TypeError(
            f"{context} must be an int, got {type(mantissa).__name__}"
        )
    minimum, maximum = mantissa_bounds(bits)
    if not minimum <= mantissa <= maximum:
        raise ArithmeticOverflow(
            format_error(
                "mantissa_overflow",
                context=context,
                mantissa=mantissa,
                bits=bits,
                minimum=minimum,
                maximum=maximum,
            )
        )
    return mantissa


def validate_non_negative_amount(amount: ScaledAmount) -> None:
    """
    Validate that an amount is zero or positive.

    Raises
    ------
    NegativeAmountUnsupported
        If the amount's mantissa is negative
    """
    if amount.mantissa < 0:
        raise NegativeAmountUnsupported(format_error("negative_amount", amount=amount))
