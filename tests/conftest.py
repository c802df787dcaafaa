import os
from typing import Dict, List, Mapping, Optional

import pytest
import redis

from georedis import GeoClient, GeoKey, RedisStore, StoreError
from georedis.models import Candidate

PEOPLE = [
    GeoKey(lat=43.6667, lon=-79.4167, label="John"),
    GeoKey(lat=39.9523, lon=-75.1638, label="Shankar"),
    GeoKey(lat=37.4688, lon=-122.1411, label="Cynthia"),
    GeoKey(lat=37.7691, lon=-122.4449, label="Chen"),
]

CITIES = [
    GeoKey(lat=43.6667, lon=-79.4167, label="Toronto"),
    GeoKey(lat=39.9523, lon=-75.1638, label="Philadelphia"),
    GeoKey(lat=37.4688, lon=-122.1411, label="Palo Alto"),
    GeoKey(lat=37.7691, lon=-122.4449, label="San Francisco"),
    GeoKey(lat=47.5500, lon=-52.6667, label="St. John's"),
]


class MemoryStore:
    """Sorted-set semantics in a dict, enough to drive the search code."""

    def __init__(self) -> None:
        self.sets: Dict[str, Dict[str, float]] = {}
        self.scans: List[tuple] = []
        self.closed = False

    def insert_scored(self, collection: str, members: Mapping[str, float]) -> int:
        target = self.sets.setdefault(collection, {})
        added = sum(1 for label in members if label not in target)
        target.update(members)
        return added

    def remove_by_key(self, collection: str, *labels: str) -> int:
        target = self.sets.get(collection, {})
        return sum(1 for label in labels if target.pop(label, None) is not None)

    def scan_by_score_range(
        self,
        collection: str,
        lower: float,
        upper: float,
        limit: Optional[int] = None,
    ) -> List[Candidate]:
        self.scans.append((collection, lower, upper, limit))
        rows = sorted(
            (score, label)
            for label, score in self.sets.get(collection, {}).items()
            if lower <= score < upper
        )
        if limit is not None:
            rows = rows[:limit]
        return [Candidate(label=label, score=score) for score, label in rows]

    def count(self, collection: str) -> int:
        return len(self.sets.get(collection, {}))

    def close(self) -> None:
        self.closed = True


class FailingScanStore(MemoryStore):
    def __init__(self, fail_on: int = 0) -> None:
        super().__init__()
        self.fail_on = fail_on

    def scan_by_score_range(self, collection, lower, upper, limit=None):
        if len(self.scans) == self.fail_on:
            self.scans.append((collection, lower, upper, limit))
            raise StoreError("READONLY You can't write against a read only replica.")
        return super().scan_by_score_range(collection, lower, upper, limit)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def geo_client(memory_store: MemoryStore) -> GeoClient:
    return GeoClient(store=memory_store)


@pytest.fixture
def redis_store():
    url = os.getenv("GEOREDIS_TEST_URL", "redis://127.0.0.1:6379/15")
    client = redis.Redis.from_url(url, decode_responses=True, socket_connect_timeout=0.5)
    try:
        client.ping()
    except redis.RedisError:
        client.close()
        pytest.skip(f"redis not reachable at {url}")
    store = RedisStore(client)
    yield store
    store.close()


@pytest.fixture
def failing_store() -> FailingScanStore:
    return FailingScanStore(fail_on=1)


@pytest.fixture
def people() -> List[GeoKey]:
    return list(PEOPLE)


@pytest.fixture
def cities() -> List[GeoKey]:
    return list(CITIES)
