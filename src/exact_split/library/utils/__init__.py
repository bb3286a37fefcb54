"""
Utility functions for the exact-split library.

"""

from exact_split.library.utils.amounts import ScaledAmount, to_minimal_units
from exact_split.library.utils.parallel import chunk_ranges, parallel_index_map

__all__ = [
    "ScaledAmount",
    "chunk_ranges",
    "parallel_index_map",
    "to_minimal_units",
]
