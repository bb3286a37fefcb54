"""
Main components for the exact-split library.

Nothing is exported from this module, users should import from specific submodules:
- exact_split.library.allocations (allocate, split_decimal, Allocation)
- exact_split.library.config (configuration models, YAML loading, logging setup)
- exact_split.library.utils (ScaledAmount, parallel helpers)
- exact_split.library.validation (validation functions)
"""

from __future__ import annotations
