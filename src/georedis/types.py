from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .exceptions import PrecisionError

MIN_BIT_DEPTH = 1
# Scores are stored as float64; 52 bits is the widest hash that survives intact.
MAX_BIT_DEPTH = 52
EARTH_RADIUS_M = 6372797.560856

_NEIGHBOR_DIRECTIONS: List[Tuple[int, int]] = [
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
]


@dataclass(frozen=True)
class GeoRange:
    """Half-open ``[lower, upper)`` interval of scores in storage bit-depth units."""

    lower: float
    upper: float

    def __contains__(self, score: float) -> bool:
        return self.lower <= score < self.upper


def check_bit_depth(bit_depth: int) -> int:
    if isinstance(bit_depth, bool) or not isinstance(bit_depth, int):
        raise PrecisionError(f"bit depth must be an integer, got {bit_depth!r}")
    if not MIN_BIT_DEPTH <= bit_depth <= MAX_BIT_DEPTH:
        raise PrecisionError(
            f"bit depth must be between {MIN_BIT_DEPTH} and {MAX_BIT_DEPTH}, got {bit_depth}"
        )
    return bit_depth


def encode_int(lat: float, lon: float, bit_depth: int = MAX_BIT_DEPTH) -> int:
    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]
    combined = 0

    for bit in range(bit_depth):
        combined <<= 1
        if bit % 2 == 0:
            mid = (lon_range[0] + lon_range[1]) / 2
            if lon > mid:
                combined |= 1
                lon_range[0] = mid
            else:
                lon_range[1] = mid
        else:
            mid = (lat_range[0] + lat_range[1]) / 2
            if lat > mid:
                combined |= 1
                lat_range[0] = mid
            else:
                lat_range[1] = mid

    return combined


def decode_bbox_int(
    hash_int: int, bit_depth: int = MAX_BIT_DEPTH
) -> Tuple[float, float, float, float]:
    """Return ``(min_lat, min_lon, max_lat, max_lon)`` of the cell."""
    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]

    for bit in range(bit_depth):
        on = (hash_int >> (bit_depth - 1 - bit)) & 1
        target = lon_range if bit % 2 == 0 else lat_range
        mid = (target[0] + target[1]) / 2
        if on:
            target[0] = mid
        else:
            target[1] = mid

    return lat_range[0], lon_range[0], lat_range[1], lon_range[1]


def decode_int(
    hash_int: int, bit_depth: int = MAX_BIT_DEPTH
) -> Tuple[float, float, float, float]:
    """Decode a hash to the center of its cell.

    Returns ``(lat, lon, lat_err, lon_err)`` where the errors are half the
    cell height and width in degrees.
    """
    min_lat, min_lon, max_lat, max_lon = decode_bbox_int(hash_int, bit_depth)
    lat = (min_lat + max_lat) / 2
    lon = (min_lon + max_lon) / 2
    return lat, lon, max_lat - lat, max_lon - lon


def neighbor_int(
    hash_int: int, direction: Tuple[int, int], bit_depth: int = MAX_BIT_DEPTH
) -> int:
    lat, lon, lat_err, lon_err = decode_int(hash_int, bit_depth)
    neighbor_lat = lat + direction[0] * lat_err * 2
    neighbor_lon = lon + direction[1] * lon_err * 2
    # Longitude wraps across the antimeridian, latitude saturates at the poles.
    if neighbor_lon > 180:
        neighbor_lon -= 360
    elif neighbor_lon < -180:
        neighbor_lon += 360
    neighbor_lat = max(-90.0, min(90.0, neighbor_lat))
    return encode_int(neighbor_lat, neighbor_lon, bit_depth)


def neighbors_int(hash_int: int, bit_depth: int = MAX_BIT_DEPTH) -> List[int]:
    """The 8 surrounding cells, clockwise from north."""
    return [
        neighbor_int(hash_int, direction, bit_depth)
        for direction in _NEIGHBOR_DIRECTIONS
    ]


def distance_between_points(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Great-circle distance in meters (haversine)."""
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)

    dlat = rlat2 - rlat1
    dlon = rlon2 - rlon1

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))
