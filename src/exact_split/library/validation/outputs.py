"""
Output share validation functions for the exact-split library.

This module contains validation functions for allocation output including:
- Share count matching the number of recipients
- Conservation (share mantissas sum to the split amount)
- A single output scale across all shares
- Fair distribution (at most one minimal unit between shares)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from exact_split.library.error_messages import format_error
from exact_split.library.exceptions import OutputValidationError

if TYPE_CHECKING:
    from exact_split.library.utils.amounts import ScaledAmount


def validate_share_count(shares: Sequence[ScaledAmount], recipients: int) -> None:
    """
    Validate that there is exactly one share per recipient.

    Raises
    ------
    OutputValidationError
        If the number of shares differs from recipients
    """
    if len(shares) != recipients:
        raise OutputValidationError(
            format_error("share_count_mismatch", actual=len(shares), expected=recipients)
        )


def validate_conservation(shares: Sequence[ScaledAmount], raw: int) -> None:
    """
    Validate that share mantissas sum exactly to the split amount.

    Parameters
    ----------
    shares
        Allocated shares
    raw
        Mantissa of the amount that was split, in minimal units

    Raises
    ------
    OutputValidationError
        If the sum of share mantissas differs from raw
    """
    total = sum(share.mantissa for share in shares)
    if total != raw:
        raise OutputValidationError(
            format_error("shares_not_conserved", total=total, raw=raw, diff=raw - total)
        )


def validate_uniform_scale(shares: Sequence[ScaledAmount], output_scale: int) -> None:
    """
    Validate that every share is expressed at the output scale.

    Raises
    ------
    OutputValidationError
        If any share has a different scale
    """
    scales = sorted({share.scale for share in shares})
    if scales and scales != [output_scale]:
        raise OutputValidationError(
            format_error("mixed_share_scales", scales=scales, output_scale=output_scale)
        )


def validate_fair_distribution(shares: Sequence[ScaledAmount]) -> None:
    """
    Validate that share mantissas differ by at most one minimal unit.

    Raises
    ------
    OutputValidationError
        If the largest and smallest share differ by more than one unit
    """
    if not shares:
        return
    mantissas = [share.mantissa for share in shares]
    spread = max(mantissas) - min(mantissas)
    if spread > 1:
        raise OutputValidationError(
            f"Shares differ by {spread} minimal units; "
            "a fair split differs by at most 1."
        )
