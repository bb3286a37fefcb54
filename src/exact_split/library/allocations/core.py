"""
Exact allocation of a fixed-point amount among recipients.

The allocator reads an amount's mantissa as raw minimal units, splits the
integer quotient evenly, hands the remainder out one unit at a time to the
first recipients, and re-expresses every share at the requested output scale.
All arithmetic is integer arithmetic on mantissas.

Scale reinterpretation
----------------------
The amount's own scale is never applied. ``allocate(ScaledAmount(1234567, 0),
1, output_scale=2)`` returns a single share of 12345.67, not 1234567.00.
Callers who want a value-preserving split must first express the amount at
the scale they want split (e.g. ``ScaledAmount.from_decimal("100.01")``) and
pass that same scale as ``output_scale``.
"""

from __future__ import annotations

import logging

from attrs import evolve

from exact_split.library.allocations.results import Allocation
from exact_split.library.config.models import AllocatorConfig
from exact_split.library.error_messages import format_error
from exact_split.library.exceptions import AllocationError
from exact_split.library.utils.amounts import ScaledAmount, to_minimal_units
from exact_split.library.utils.parallel import parallel_index_map
from exact_split.library.validation import (
    validate_mantissa_range,
    validate_non_negative_amount,
    validate_recipient_count,
    validate_scale,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = AllocatorConfig()


def distribute_shares(
    raw: int,
    recipients: int,
    output_scale: int,
    config: AllocatorConfig = DEFAULT_CONFIG,
) -> list[ScaledAmount]:
    """
    Distribute ``raw`` minimal units among recipients.

    Recipient ``i`` receives ``raw // recipients`` units plus one extra unit
    when ``i`` is smaller than the remainder, so the first recipients absorb
    the remainder in index order.

    Parameters
    ----------
    raw
        Non-negative amount in minimal units
    recipients
        Positive number of recipients
    output_scale
        Scale of the returned shares
    config
        Allocator settings controlling the thread pool

    Returns
    -------
    list[ScaledAmount]
        Shares in recipient index order

    Notes
    -----
    Each share depends only on its index, so shares are computed on a thread
    pool once ``recipients`` reaches ``config.parallel_threshold``. Results
    are gathered by index, so the order is the same either way.
    """
    base, remainder = divmod(raw, recipients)

    def share_at(i: int) -> ScaledAmount:
        extra = 1 if i < remainder else 0
        return ScaledAmount(base + extra, output_scale)

    if recipients >= config.parallel_threshold:
        logger.debug(
            "Computing %d shares on a thread pool (max_workers=%s, chunk_size=%d)",
            recipients,
            config.max_workers,
            config.chunk_size,
        )
        return parallel_index_map(
            share_at,
            recipients,
            max_workers=config.max_workers,
            chunk_size=config.chunk_size,
        )

    return [share_at(i) for i in range(recipients)]


def reconcile_shares(
    shares: list[ScaledAmount],
    raw: int,
    config: AllocatorConfig = DEFAULT_CONFIG,
) -> list[ScaledAmount]:
    """
    Make the share mantissas sum exactly to ``raw``.

    While the shares fall short of ``raw``, the first share is increased by
    one minimal unit and the total is recomputed. The list is modified in
    place and returned.

    Parameters
    ----------
    shares
        Shares from :func:`distribute_shares`
    raw
        Amount in minimal units that the shares must sum to
    config
        Allocator settings controlling the mantissa width

    Returns
    -------
    list[ScaledAmount]
        The reconciled shares

    Raises
    ------
    AllocationError
        If the shares already exceed ``raw``. The distribution never
        overshoots a non-negative amount, so this signals a bug.
    ArithmeticOverflow
        If the first share or the total leaves the mantissa range
    """
    total = sum(share.mantissa for share in shares)
    diff = raw - total
    if diff < 0:
        raise AllocationError(
            format_error("distribution_overshoot", total=total, raw=raw, diff=diff)
        )

    while diff > 0:
        logger.debug("Reconciling: shares are %d minimal units short", diff)
        first = validate_mantissa_range(
            shares[0].mantissa + 1, context="first share", bits=config.mantissa_bits
        )
        shares[0] = evolve(shares[0], mantissa=first)
        total = sum(share.mantissa for share in shares)
        diff = raw - total

    validate_mantissa_range(total, context="share total", bits=config.mantissa_bits)
    return shares


def allocate(
    amount: ScaledAmount,
    recipients: int,
    output_scale: int,
    *,
    config: AllocatorConfig | None = None,
) -> Allocation:
    """
    Split an amount among recipients without losing a minimal unit.

    Parameters
    ----------
    amount
        Amount to split. Its mantissa is split as raw minimal units; its
        scale is ignored (see module documentation).
    recipients
        Number of recipients (positive int)
    output_scale
        Scale of the returned shares
    config
        Allocator settings (default: :class:`AllocatorConfig` defaults)

    Returns
    -------
    Allocation
        One share per recipient, in index order, whose mantissas sum exactly
        to ``amount.mantissa``. Shares differ by at most one minimal unit and
        never increase with the index; zero-valued shares are kept.

    Raises
    ------
    InvalidRecipientCount
        If recipients is not a positive int
    UnsupportedScale
        If output_scale or the amount's scale is negative or exceeds
        ``config.max_scale``
    NegativeAmountUnsupported
        If the amount is negative
    ArithmeticOverflow
        If a mantissa exceeds ``config.mantissa_bits``

    Examples
    --------
    >>> allocation = allocate(ScaledAmount(10001, 2), 4, 2)
    >>> allocation.mantissas
    [2501, 2500, 2500, 2500]
    >>> print(allocation[0])
    25.01
    """
    if config is None:
        config = DEFAULT_CONFIG

    validate_recipient_count(recipients)
    validate_scale(output_scale, scale_name="output_scale", max_scale=config.max_scale)
    validate_scale(amount.scale, scale_name="amount scale", max_scale=config.max_scale)
    validate_non_negative_amount(amount)
    raw = validate_mantissa_range(
        to_minimal_units(amount), context="amount", bits=config.mantissa_bits
    )

    logger.debug(
        "Allocating %d minimal units among %d recipients at scale %d",
        raw,
        recipients,
        output_scale,
    )
    shares = distribute_shares(raw, recipients, output_scale, config)
    shares = reconcile_shares(shares, raw, config)

    return Allocation(
        amount=amount,
        recipients=recipients,
        output_scale=output_scale,
        shares=shares,
    )


def split_decimal(
    mantissa: int,
    scale: int,
    recipients: int,
    output_scale: int,
    *,
    config: AllocatorConfig | None = None,
) -> list[tuple[int, int]]:
    """
    Split ``mantissa`` at ``scale`` and return ``(mantissa, scale)`` pairs.

    Flat-argument form of :func:`allocate` for callers that do not work with
    :class:`ScaledAmount`.

    Examples
    --------
    >>> split_decimal(10001, 2, 3, 2)
    [(3334, 2), (3334, 2), (3333, 2)]
    """
    allocation = allocate(
        ScaledAmount(mantissa, scale), recipients, output_scale, config=config
    )
    return [(share.mantissa, share.scale) for share in allocation]
