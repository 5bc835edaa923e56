"""
Mathematical primitives for the split rule.

Exact rational floor bounds and per-beneficiary net accounting.
No floating point anywhere in this package.
"""

from src.core.math.exact_rational import (
    ONE,
    SplitBounds,
    complement,
    floor_share,
    percent_fraction,
    split_bounds,
)
from src.core.math.net_position import (
    NetPositions,
    contributed_by,
    net_of,
    net_positions,
    received_by,
)

__all__ = [
    # Exact rational
    "ONE",
    "percent_fraction",
    "complement",
    "floor_share",
    "SplitBounds",
    "split_bounds",
    # Net accounting
    "received_by",
    "contributed_by",
    "net_of",
    "NetPositions",
    "net_positions",
]
