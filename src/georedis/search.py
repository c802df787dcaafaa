"""Add, remove and radius-search coordinates on any :class:`ScoredStore`.

A radius search runs in two phases. The radius picks a coarse bit depth,
the cells around the center at that depth become a handful of score ranges,
and each range is scanned. Everything the scans return is then ranked by
great-circle distance. Results are cell based: points a little outside the
radius can be returned, they just sort after the closer ones.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .exceptions import ScanError, StoreError
from .models import Candidate, GeoKey, RankedResult
from .precision import DEFAULT_PRECISION_TABLE, PrecisionTable, select_bit_depth
from .ranges import decompose
from .ranking import rank_candidates
from .store import ScoredStore
from .types import GeoRange, check_bit_depth, encode_int

logger = logging.getLogger(__name__)


def add_coordinates(
    store: ScoredStore, collection: str, bit_depth: int, *keys: GeoKey
) -> int:
    """Store each key under its label; returns how many labels were new."""
    check_bit_depth(bit_depth)
    if not keys:
        return 0
    members = {
        key.label: float(encode_int(key.lat, key.lon, bit_depth)) for key in keys
    }
    return store.insert_scored(collection, members)


def remove_coordinates_by_keys(store: ScoredStore, collection: str, *labels: str) -> int:
    if not labels:
        return 0
    return store.remove_by_key(collection, *labels)


def query_ranges(
    lat: float,
    lon: float,
    radius: float,
    bit_depth: int,
    precision: PrecisionTable = DEFAULT_PRECISION_TABLE,
) -> List[GeoRange]:
    search_bit_depth = select_bit_depth(radius, precision)
    ranges = decompose(lat, lon, search_bit_depth, bit_depth)
    logger.debug(
        "radius %.1fm around (%f, %f): search depth %d, %d range(s)",
        radius,
        lat,
        lon,
        search_bit_depth,
        len(ranges),
    )
    return ranges


def scan_ranges(
    store: ScoredStore,
    collection: str,
    ranges: List[GeoRange],
    limit: Optional[int] = None,
) -> List[Candidate]:
    """Scan every range in order, stopping at the first failure."""
    candidates: List[Candidate] = []
    for geo_range in ranges:
        try:
            found = store.scan_by_score_range(
                collection, geo_range.lower, geo_range.upper, limit=limit
            )
        except StoreError as exc:
            logger.error(
                "scan of %s [%f, %f) failed: %s",
                collection,
                geo_range.lower,
                geo_range.upper,
                exc,
            )
            raise ScanError(str(exc), geo_range=geo_range) from exc
        logger.debug(
            "scan of %s [%f, %f): %d member(s)",
            collection,
            geo_range.lower,
            geo_range.upper,
            len(found),
        )
        candidates.extend(found)
    return candidates


def search_nearby(
    store: ScoredStore,
    collection: str,
    lat: float,
    lon: float,
    radius: float,
    bit_depth: int,
    limit: int = -1,
    precision: PrecisionTable = DEFAULT_PRECISION_TABLE,
) -> List[RankedResult]:
    """Labels around ``(lat, lon)`` with their distance in meters, nearest first.

    A non-negative ``limit`` caps each range scan as well as the final list.
    The cap is applied per range, so with many points in one range the
    result is an approximation of the true nearest ``limit``.
    """
    ranges = query_ranges(lat, lon, radius, bit_depth, precision)
    scan_limit = limit if limit >= 0 else None
    candidates = scan_ranges(store, collection, ranges, limit=scan_limit)
    return rank_candidates(lat, lon, bit_depth, candidates, limit)


def search_by_radius(
    store: ScoredStore,
    collection: str,
    lat: float,
    lon: float,
    radius: float,
    bit_depth: int,
    precision: PrecisionTable = DEFAULT_PRECISION_TABLE,
) -> List[str]:
    results = search_nearby(
        store, collection, lat, lon, radius, bit_depth, precision=precision
    )
    return [result.label for result in results]


def search_by_radius_with_limit(
    store: ScoredStore,
    collection: str,
    lat: float,
    lon: float,
    radius: float,
    bit_depth: int,
    limit: int,
    precision: PrecisionTable = DEFAULT_PRECISION_TABLE,
) -> List[str]:
    results = search_nearby(
        store, collection, lat, lon, radius, bit_depth, limit, precision
    )
    return [result.label for result in results]
