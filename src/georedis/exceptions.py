from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .types import GeoRange


class GeoRedisError(Exception):
    """Base error for everything raised by georedis."""


class PrecisionError(GeoRedisError, ValueError):
    """Bit depth out of range, or too coarse for the requested search."""


class StoreError(GeoRedisError):
    """The backing store rejected a command."""


class ConnectionError(StoreError):
    """Could not reach the backing store (includes timeouts)."""


class ScanError(StoreError):
    """A score-range scan failed; the search was aborted."""

    def __init__(self, message: str, geo_range: Optional["GeoRange"] = None) -> None:
        super().__init__(message)
        self.geo_range = geo_range
