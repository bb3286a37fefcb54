"""
Exact, loss-free splitting of fixed-point amounts.

"""

from importlib.metadata import PackageNotFoundError, version

from exact_split.library.allocations import Allocation, allocate, split_decimal
from exact_split.library.utils import ScaledAmount

try:
    __version__ = version("exact-split")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "unknown"

__all__ = [
    "Allocation",
    "ScaledAmount",
    "__version__",
    "allocate",
    "split_decimal",
]
