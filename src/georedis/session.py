from __future__ import annotations

from typing import Optional

from .client import DEFAULT_BIT_DEPTH, GeoClient
from .precision import DEFAULT_PRECISION_TABLE, PrecisionTable
from .store import REDIS_URL

_default_client: Optional[GeoClient] = None


def setup(
    url: str = REDIS_URL,
    bit_depth: int = DEFAULT_BIT_DEPTH,
    precision: PrecisionTable = DEFAULT_PRECISION_TABLE,
    client: Optional[GeoClient] = None,
) -> GeoClient:
    global _default_client
    _default_client = client or GeoClient(
        url=url,
        bit_depth=bit_depth,
        precision=precision,
    )
    return _default_client


def get_client() -> GeoClient:
    if _default_client is None:
        raise RuntimeError("georedis.setup(...) must be called first")
    return _default_client
