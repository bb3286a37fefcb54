"""
Validation for the exact-split library.

"""

from .inputs import (
    MAX_MANTISSA_BITS,
    MAX_SUPPORTED_SCALE,
    mantissa_bounds,
    validate_mantissa_range,
    validate_non_negative_amount,
    validate_recipient_count,
    validate_scale,
)
from .outputs import (
    validate_conservation,
    validate_fair_distribution,
    validate_share_count,
    validate_uniform_scale,
)

__all__ = [
    "MAX_MANTISSA_BITS",
    "MAX_SUPPORTED_SCALE",
    "mantissa_bounds",
    "validate_conservation",
    "validate_fair_distribution",
    "validate_mantissa_range",
    "validate_non_negative_amount",
    "validate_recipient_count",
    "validate_scale",
    "validate_share_count",
    "validate_uniform_scale",
]
