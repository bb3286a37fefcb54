"""
Error message templates for exact-split.

Messages follow WHAT/CAUSE/FIX structure.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "invalid_recipient_count": """
Invalid number of recipients: {recipients!r}.

WHAT HAPPENED:
  An amount can only be split among a positive whole number of recipients.

LIKELY CAUSE:
  - The recipient list was empty when its length was taken
  - A float or string was passed instead of an int

HOW TO FIX:
  Pass a positive integer:
  >>> allocate(amount, recipients=len(people), output_scale=2)
""",
    "unsupported_scale": """
Unsupported {scale_name}: {scale!r}.

WHAT HAPPENED:
  Scales count fractional digits and must be integers between 0 and
  {max_scale} (inclusive).

LIKELY CAUSE:
  - A negative scale or a non-integer was passed
  - The scale exceeds the fixed-point capacity of {max_scale} digits

HOW TO FIX:
  Choose a scale in range, e.g. 2 for cents:
  >>> allocate(amount, recipients=4, output_scale=2)
""",
    "mantissa_overflow": """
Arithmetic overflow in {context}.

WHAT HAPPENED:
  The mantissa {mantissa} does not fit in a signed {bits}-bit integer
  (allowed range [{minimum}, {maximum}]).

LIKELY CAUSE:
  The amount was built from too many significant digits.

HOW TO FIX:
  Reduce the amount's precision before splitting, or raise
  `mantissa_bits` in the allocator configuration (at most 128).
""",
    "negative_amount": """
Negative amount {amount} cannot be split.

WHAT HAPPENED:
  The allocator only distributes non-negative amounts.

HOW TO FIX:
  Split the absolute value and negate every share:
  >>> shares = allocate(ScaledAmount(-amount.mantissa, amount.scale), n, scale)
""",
    "distribution_overshoot": """
Initial distribution overshoots the amount.

WHAT HAPPENED:
  The shares sum to {total} minimal units but the amount is {raw}
  (difference {diff}).

LIKELY CAUSE:
  Implementation bug. The quotient/remainder distribution can never
  exceed a non-negative amount.

HOW TO FIX:
  This is likely a bug. Please report it with the amount, the number of
  recipients and the output scale.
""",
    "share_count_mismatch": """
Allocation has {actual} shares for {expected} recipients.

WHAT HAPPENED:
  Every recipient must receive exactly one share, zero-valued shares included.

HOW TO FIX:
  This is likely a bug. Please report it with the allocation inputs.
""",
    "shares_not_conserved": """
Shares do not sum to the split amount.

WHAT HAPPENED:
  Sum of share mantissas: {total}
  Amount mantissa:        {raw}
  Difference:             {diff}

LIKELY CAUSE:
  The allocation was built by hand rather than with `allocate()`, or a share
  was modified afterwards.

HOW TO FIX:
  Recompute the allocation:
  >>> allocation = allocate(amount, recipients, output_scale)
""",
    "mixed_share_scales": """
Shares carry different scales: {scales}.

WHAT HAPPENED:
  All shares of one allocation must be expressed at the output scale
  ({output_scale}).

HOW TO FIX:
  Recompute the allocation with `allocate()`.
""",
    "invalid_amount": """
Cannot read {value!r} as a decimal amount.

WHAT HAPPENED:
  The value is not a finite decimal number.

HOW TO FIX:
  Pass a decimal string such as "100.01", an int, or a finite Decimal.
""",
    "config_file_missing": """
Configuration file not found: {path}

HOW TO FIX:
  Check the path, or run without --config to use the defaults.
""",
    "config_file_invalid": """
Configuration file {path} is invalid.

WHAT HAPPENED:
  {details}

HOW TO FIX:
  The file must be a YAML mapping with optional `allocator` and `logging`
  sections, e.g.:

  allocator:
    max_workers: 4
  logging:
    level: INFO
""",
    "invalid_log_level": """
Log level '{level}' not recognized.

HOW TO FIX:
  {suggestion}
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    matches = get_close_matches(value, valid_options, n=max_suggestions, cutoff=0.6)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(valid_options)}"
