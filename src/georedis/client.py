from __future__ import annotations

import os
from typing import List, Optional, Sequence, Union

from . import search
from .models import GeoKey, RankedResult
from .precision import DEFAULT_PRECISION_TABLE, PrecisionTable
from .store import REDIS_URL, RedisStore, ScoredStore
from .types import check_bit_depth

DEFAULT_BIT_DEPTH = int(os.getenv("GEOREDIS_BIT_DEPTH", "52"))

CoordinateLike = Union[GeoKey, Sequence]


class GeoClient:
    def __init__(
        self,
        url: str = REDIS_URL,
        bit_depth: int = DEFAULT_BIT_DEPTH,
        precision: PrecisionTable = DEFAULT_PRECISION_TABLE,
        store: Optional[ScoredStore] = None,
    ) -> None:
        self.bit_depth = check_bit_depth(bit_depth)
        self.precision = precision
        self._store = store or RedisStore.from_url(url)

    @property
    def store(self) -> ScoredStore:
        return self._store

    def close(self) -> None:
        self._store.close()

    def __enter__(self) -> "GeoClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def add_coordinates(
        self, collection: str, *coordinates: CoordinateLike, bit_depth: Optional[int] = None
    ) -> int:
        keys = [self._geo_key(value) for value in coordinates]
        return search.add_coordinates(
            self._store, collection, self._depth(bit_depth), *keys
        )

    def remove_coordinates_by_keys(self, collection: str, *labels: str) -> int:
        return search.remove_coordinates_by_keys(self._store, collection, *labels)

    def count(self, collection: str) -> int:
        return self._store.count(collection)

    def search_by_radius(
        self,
        collection: str,
        lat: float,
        lon: float,
        radius: float,
        bit_depth: Optional[int] = None,
    ) -> List[str]:
        return search.search_by_radius(
            self._store,
            collection,
            lat,
            lon,
            radius,
            self._depth(bit_depth),
            precision=self.precision,
        )

    def search_by_radius_with_limit(
        self,
        collection: str,
        lat: float,
        lon: float,
        radius: float,
        limit: int,
        bit_depth: Optional[int] = None,
    ) -> List[str]:
        return search.search_by_radius_with_limit(
            self._store,
            collection,
            lat,
            lon,
            radius,
            self._depth(bit_depth),
            limit,
            precision=self.precision,
        )

    def search_nearby(
        self,
        collection: str,
        lat: float,
        lon: float,
        radius: float,
        limit: int = -1,
        bit_depth: Optional[int] = None,
    ) -> List[RankedResult]:
        return search.search_nearby(
            self._store,
            collection,
            lat,
            lon,
            radius,
            self._depth(bit_depth),
            limit,
            precision=self.precision,
        )

    def _depth(self, bit_depth: Optional[int]) -> int:
        return self.bit_depth if bit_depth is None else bit_depth

    @staticmethod
    def _geo_key(value: CoordinateLike) -> GeoKey:
        if isinstance(value, GeoKey):
            return value
        if isinstance(value, (str, bytes)) or len(value) != 3:
            raise ValueError("coordinates must be GeoKey or (lat, lon, label)")
        lat, lon, label = value
        return GeoKey(lat=lat, lon=lon, label=label)
