"""Sorted-set storage for encoded coordinates."""

from __future__ import annotations

import logging
import os
from typing import Any, List, Mapping, Optional, Protocol

import redis

from .exceptions import ConnectionError, StoreError
from .models import Candidate

logger = logging.getLogger(__name__)

REDIS_URL = os.getenv("GEOREDIS_URL", "redis://localhost:6379/0")


class ScoredStore(Protocol):
    def insert_scored(self, collection: str, members: Mapping[str, float]) -> int:
        ...

    def remove_by_key(self, collection: str, *labels: str) -> int:
        ...

    def scan_by_score_range(
        self,
        collection: str,
        lower: float,
        upper: float,
        limit: Optional[int] = None,
    ) -> List[Candidate]:
        ...

    def count(self, collection: str) -> int:
        ...

    def close(self) -> None:
        ...


class RedisStore:
    """Collections are Redis sorted sets; labels are members, hashes are scores.

    Scans treat ranges as half-open: ``lower`` is inclusive and ``upper`` is
    sent with Redis' ``(`` exclusive prefix.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._redis = client

    @classmethod
    def from_url(cls, url: str = REDIS_URL, **kwargs: Any) -> "RedisStore":
        kwargs.setdefault("decode_responses", True)
        return cls(redis.Redis.from_url(url, **kwargs))

    def close(self) -> None:
        self._redis.close()

    def __enter__(self) -> "RedisStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def insert_scored(self, collection: str, members: Mapping[str, float]) -> int:
        return int(self._call("zadd", collection, dict(members)))

    def remove_by_key(self, collection: str, *labels: str) -> int:
        return int(self._call("zrem", collection, *labels))

    def scan_by_score_range(
        self,
        collection: str,
        lower: float,
        upper: float,
        limit: Optional[int] = None,
    ) -> List[Candidate]:
        paging = {"start": 0, "num": limit} if limit is not None else {}
        rows = self._call(
            "zrangebyscore",
            collection,
            f"{lower:f}",
            f"({upper:f}",
            withscores=True,
            **paging,
        )
        return [
            Candidate(label=self._decode(member), score=float(score))
            for member, score in rows
        ]

    def count(self, collection: str) -> int:
        return int(self._call("zcard", collection))

    def _call(self, command: str, *args: Any, **kwargs: Any) -> Any:
        try:
            return getattr(self._redis, command)(*args, **kwargs)
        except (redis.ConnectionError, redis.TimeoutError) as exc:
            logger.warning("redis %s on %r unreachable: %s", command, args[0], exc)
            raise ConnectionError(str(exc)) from exc
        except redis.RedisError as exc:
            raise StoreError(str(exc)) from exc

    @staticmethod
    def _decode(member: Any) -> str:
        if isinstance(member, bytes):
            return member.decode("utf-8")
        return str(member)
