"""
Result container for allocation calculations.

An Allocation keeps the shares produced by one call to
:func:`exact_split.library.allocations.allocate` together with the inputs that
produced them, so that conservation can be checked against the original amount
at any time. Results are validated on construction:

1. **Count**: exactly one share per recipient, zero-valued shares included.
2. **Scale**: every share is expressed at the output scale.
3. **Conservation**: share mantissas sum to the amount's mantissa.
"""

from __future__ import annotations

from collections.abc import Iterator

import pandas as pd
from attrs import field, frozen

from exact_split.library.utils.amounts import ScaledAmount
from exact_split.library.validation import (
    validate_conservation,
    validate_recipient_count,
    validate_share_count,
    validate_uniform_scale,
)


@frozen
class Allocation:
    """Ordered, immutable split of an amount among recipients.

    Attributes
    ----------
    amount
        The amount that was split. Only its mantissa takes part in the split.
    recipients
        Number of recipients
    output_scale
        Scale at which every share is expressed
    shares
        One share per recipient, in recipient index order
    """

    amount: ScaledAmount
    recipients: int
    output_scale: int
    shares: tuple[ScaledAmount, ...] = field(converter=tuple)

    def __attrs_post_init__(self):
        """Validate the result."""
        self.validate()

    def validate(self) -> None:
        """Validate recipient count, share count, scale and conservation.

        Raises
        ------
        InvalidRecipientCount
            If recipients is not a positive int
        OutputValidationError
            If any of the checks fails
        """
        validate_recipient_count(self.recipients)
        validate_share_count(self.shares, self.recipients)
        validate_uniform_scale(self.shares, self.output_scale)
        validate_conservation(self.shares, self.amount.mantissa)

    @property
    def mantissas(self) -> list[int]:
        """Share mantissas in recipient order."""
        return [share.mantissa for share in self.shares]

    @property
    def total(self) -> ScaledAmount:
        """Sum of all shares at the output scale."""
        return ScaledAmount(sum(self.mantissas), self.output_scale)

    @property
    def spread(self) -> int:
        """Difference in minimal units between the largest and smallest share."""
        mantissas = self.mantissas
        return max(mantissas) - min(mantissas)

    def __len__(self) -> int:
        return len(self.shares)

    def __iter__(self) -> Iterator[ScaledAmount]:
        return iter(self.shares)

    def __getitem__(self, index: int) -> ScaledAmount:
        return self.shares[index]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Return the shares as a table.

        Returns
        -------
        pd.DataFrame
            One row per recipient, indexed by 1-based ``recipient``, with
            columns ``mantissa``, ``scale`` and ``value``. ``value`` holds exact
            :class:`decimal.Decimal` objects.
        """
        return pd.DataFrame(
            {
                "mantissa": self.mantissas,
                "scale": [share.scale for share in self.shares],
                "value": [share.to_decimal() for share in self.shares],
            },
            index=pd.RangeIndex(1, len(self.shares) + 1, name="recipient"),
        )
