"""
Allocation functions and result handling for the exact-split library.

"""

from .core import allocate, distribute_shares, reconcile_shares, split_decimal
from .results import Allocation

__all__ = [
    "Allocation",
    "allocate",
    "distribute_shares",
    "reconcile_shares",
    "split_decimal",
]
