from __future__ import annotations

from operator import attrgetter
from typing import Iterable, List, Optional

from .models import Candidate, RankedResult
from .types import decode_int, distance_between_points


def rank_candidates(
    lat: float,
    lon: float,
    bit_depth: int,
    candidates: Iterable[Candidate],
    limit: Optional[int] = -1,
) -> List[RankedResult]:
    """Order candidates by distance from ``(lat, lon)``, nearest first.

    Scores are decoded at ``bit_depth`` to the center of their cell. The sort
    is stable, so equidistant candidates keep their scan order. A negative or
    ``None`` limit keeps everything.
    """
    results: List[RankedResult] = []
    for candidate in candidates:
        point_lat, point_lon, _, _ = decode_int(int(candidate.score), bit_depth)
        results.append(
            RankedResult(
                label=candidate.label,
                distance=distance_between_points(lat, lon, point_lat, point_lon),
            )
        )

    results.sort(key=attrgetter("distance"))
    if limit is None or limit < 0:
        return results
    return results[:limit]


def rank(
    lat: float,
    lon: float,
    bit_depth: int,
    candidates: Iterable[Candidate],
    limit: Optional[int] = -1,
) -> List[str]:
    return [result.label for result in rank_candidates(lat, lon, bit_depth, candidates, limit)]
