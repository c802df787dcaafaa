"""Turn a search area into the score ranges the store has to scan.

The area is the geohash cell containing the center point at the search bit
depth plus its 8 neighbors, so a circle straddling a cell edge is still
covered. Cells that are numerically adjacent collapse into a single range,
and each range is widened to the storage bit depth: one coarse cell is a
contiguous block of ``2 ** (storage - search)`` fine scores.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .exceptions import PrecisionError
from .types import GeoRange, check_bit_depth, encode_int, neighbors_int


def cell_hashes(lat: float, lon: float, bit_depth: int) -> List[int]:
    """Center cell and its neighbors, sorted and without duplicates."""
    center = encode_int(lat, lon, bit_depth)
    # Near the poles and at very coarse depths several neighbors are the same cell.
    return sorted({center, *neighbors_int(center, bit_depth)})


def merge_hashes(hashes: Iterable[int]) -> List[Tuple[int, int]]:
    """Collapse sorted hashes into half-open ``(lower, upper)`` integer spans."""
    spans: List[List[int]] = []
    for value in hashes:
        if spans and value <= spans[-1][1]:
            spans[-1][1] = max(spans[-1][1], value + 1)
        else:
            spans.append([value, value + 1])
    return [(lower, upper) for lower, upper in spans]


def decompose(
    lat: float, lon: float, search_bit_depth: int, storage_bit_depth: int
) -> List[GeoRange]:
    check_bit_depth(search_bit_depth)
    check_bit_depth(storage_bit_depth)
    if storage_bit_depth < search_bit_depth:
        raise PrecisionError(
            f"storage bit depth {storage_bit_depth} is too coarse for a search "
            f"at bit depth {search_bit_depth}"
        )

    shift = storage_bit_depth - search_bit_depth
    spans = merge_hashes(cell_hashes(lat, lon, search_bit_depth))
    return [GeoRange(float(lower << shift), float(upper << shift)) for lower, upper in spans]
