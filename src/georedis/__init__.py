"""Radius search over geohash-scored Redis sorted sets."""

from .client import GeoClient
from .exceptions import (
    ConnectionError,
    GeoRedisError,
    PrecisionError,
    ScanError,
    StoreError,
)
from .models import Candidate, GeoKey, RankedResult
from .precision import DEFAULT_PRECISION_TABLE, PrecisionTable, select_bit_depth
from .search import (
    add_coordinates,
    remove_coordinates_by_keys,
    search_by_radius,
    search_by_radius_with_limit,
    search_nearby,
)
from .session import get_client, setup
from .store import RedisStore, ScoredStore
from .types import GeoRange

__all__ = [
    "Candidate",
    "ConnectionError",
    "DEFAULT_PRECISION_TABLE",
    "GeoClient",
    "GeoKey",
    "GeoRange",
    "GeoRedisError",
    "PrecisionError",
    "PrecisionTable",
    "RankedResult",
    "RedisStore",
    "ScanError",
    "ScoredStore",
    "StoreError",
    "add_coordinates",
    "get_client",
    "remove_coordinates_by_keys",
    "search_by_radius",
    "search_by_radius_with_limit",
    "search_nearby",
    "select_bit_depth",
    "setup",
]
