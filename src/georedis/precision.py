"""Mapping from a search radius to the geohash bit depth that approximates it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .types import MAX_BIT_DEPTH, check_bit_depth

COARSEST_BIT_DEPTH = 2

# Characteristic cell width in meters, one entry per two bits dropped from
# MAX_BIT_DEPTH (52, 50, 48, ..., 4).
_CELL_WIDTHS_M: Tuple[float, ...] = (
    0.6,
    1.0,
    2.19,
    4.57,
    9.34,
    14.4,
    33.18,
    62.1,
    128.55,
    252.9,
    510.02,
    1015.8,
    2236.5,
    3866.9,
    8749.7,
    15664.0,
    33163.5,
    72226.3,
    150350.0,
    306600.0,
    474640.0,
    1099600.0,
    2349600.0,
    4849600.0,
    10018863.0,
)


@dataclass(frozen=True)
class PrecisionTable:
    """Calibration of cell widths against bit depths.

    ``widths[i]`` is the width of a cell at ``max_bit_depth - 2 * i`` bits.
    Widths must grow strictly with ``i``.
    """

    widths: Tuple[float, ...] = _CELL_WIDTHS_M
    max_bit_depth: int = MAX_BIT_DEPTH

    def __post_init__(self) -> None:
        object.__setattr__(self, "widths", tuple(float(w) for w in self.widths))
        check_bit_depth(self.max_bit_depth)
        if len(self.widths) < 2:
            raise ValueError("precision table needs at least two widths")
        if any(b <= a for a, b in zip(self.widths, self.widths[1:])):
            raise ValueError("precision table widths must be strictly increasing")
        if self.max_bit_depth - 2 * (len(self.widths) - 2) < COARSEST_BIT_DEPTH:
            raise ValueError("precision table has more steps than bit depths")

    def bit_depth_for(self, radius: float) -> int:
        if not math.isfinite(radius) or radius < 0:
            raise ValueError(f"radius must be a finite, non-negative number, got {radius!r}")
        widths = self.widths
        for step in range(len(widths) - 1):
            if radius - widths[step] < widths[step + 1] - radius:
                return self.max_bit_depth - 2 * step
        return COARSEST_BIT_DEPTH


DEFAULT_PRECISION_TABLE = PrecisionTable()


def select_bit_depth(
    radius: float, table: PrecisionTable = DEFAULT_PRECISION_TABLE
) -> int:
    """Bit depth whose cell width is closest to ``radius`` (meters)."""
    return table.bit_depth_for(radius)
