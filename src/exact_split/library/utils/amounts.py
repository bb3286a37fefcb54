"""
Exact fixed-point amounts.

A ScaledAmount is an integer mantissa paired with a non-negative decimal
scale; its value is ``mantissa * 10**-scale``. Floats never enter the
representation, and conversions to and from :class:`decimal.Decimal` go
through the Decimal tuple form so that no context rounding applies.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from attrs import evolve, field, frozen

from exact_split.library.error_messages import format_error
from exact_split.library.exceptions import ArithmeticOverflow
from exact_split.library.validation.inputs import (
    MAX_MANTISSA_BITS,
    mantissa_bounds,
    validate_mantissa_range,
    validate_scale,
)

# Decimal digits of the largest signed 128-bit integer
MAX_MANTISSA_DIGITS = len(str(mantissa_bounds()[1]))


def _check_mantissa(instance, attribute, value):
    validate_mantissa_range(value, context="ScaledAmount mantissa")


def _check_scale(instance, attribute, value):
    validate_scale(value, scale_name="ScaledAmount scale")


@frozen
class ScaledAmount:
    """
    Exact decimal value represented as (mantissa, scale).

    Attributes
    ----------
    mantissa
        Signed integer number of minimal units. Must fit in a signed
        128-bit integer.
    scale
        Number of fractional digits (0 to 28). A mantissa of 10001 at scale
        2 is the value 100.01.

    Notes
    -----
    Equality compares mantissa and scale, not numeric value: ``1 @ 0`` and
    ``100 @ 2`` are different amounts. Use :meth:`to_decimal` to compare
    values.
    """

    mantissa: int = field(validator=_check_mantissa)
    scale: int = field(default=0, validator=_check_scale)

    @classmethod
    def from_decimal(cls, value: Decimal | str | int) -> ScaledAmount:
        """
        Build an amount from a Decimal, a decimal string, or an int.

        The resulting scale is the number of fractional digits written in the
        value, so ``"100.010"`` gives mantissa 100010 at scale 3. Values with a
        positive exponent (``Decimal("1E+3")``) are expanded into the
        mantissa at scale 0.

        Raises
        ------
        ValueError
            If the value is not a finite decimal number
        UnsupportedScale
            If the value has more than 28 fractional digits
        ArithmeticOverflow
            If the mantissa does not fit in a signed 128-bit integer
        """
        if isinstance(value, bool) or not isinstance(value, (Decimal, str, int)):
            raise ValueError(format_error("invalid_amount", value=value))
        try:
            number = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation as e:
            raise ValueError(format_error("invalid_amount", value=value)) from e
        if not number.is_finite():
            raise ValueError(format_error("invalid_amount", value=value))

        sign, digits, exponent = number.as_tuple()
        mantissa = int("".join(map(str, digits))) if digits else 0
        if sign:
            mantissa = -mantissa
        if exponent > 0:
            if mantissa == 0:
                return cls(0, 0)
            # Bound the digit count before expanding the exponent
            if len(digits) + exponent > MAX_MANTISSA_DIGITS:
                minimum, maximum = mantissa_bounds()
                raise ArithmeticOverflow(
                    format_error(
                        "mantissa_overflow",
                        context="ScaledAmount mantissa",
                        mantissa=f"{value} ({len(digits) + exponent} digits)",
                        bits=MAX_MANTISSA_BITS,
                        minimum=minimum,
                        maximum=maximum,
                    )
                )
            return cls(mantissa * 10**exponent, 0)
        return cls(mantissa, -exponent)

    def to_decimal(self) -> Decimal:
        """Return the exact value as a Decimal (no context rounding)."""
        sign = 1 if self.mantissa < 0 else 0
        digits = tuple(int(d) for d in str(abs(self.mantissa)))
        return Decimal((sign, digits, -self.scale))

    def rescale(self, scale: int) -> ScaledAmount:
        """
        Return the same mantissa at another scale.

        This reinterprets the minimal units; it does not preserve the value.
        ``ScaledAmount(1234567, 0).rescale(2)`` is 12345.67.
        """
        return evolve(self, scale=scale)

    def __str__(self) -> str:
        return format(self.to_decimal(), "f")


def to_minimal_units(amount: ScaledAmount) -> int:
    """
    Return the amount's mantissa as raw minimal units.

    The amount's scale is ignored: 100.01 at scale 2 and 10001 at scale 0
    both give 10001.
    """
    return amount.mantissa
