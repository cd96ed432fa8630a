"""
Indices (precomputed lookup tables)
===================================

The session keeps simple indices over its loaded points (maps from value ->
sorted list of positions in the point list) so that moving the time window
or changing the id selection does not rescan every sample.

Example:
- `by_id[3]` gives the positions of all samples of object 3.
- `time_to_pos[120]` gives the positions of all samples taken at t=120.

Positions are sorted, so intersecting an id selection with a time window is
a two-pointer merge, and the result is already in file order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List
from bisect import bisect_left, bisect_right

from .dsa import intersect_sorted
from .models import Sample


@dataclass
class Indices:
    """Container of precomputed indices for fast filtering."""
    by_id: Dict[int, List[int]]
    time_to_pos: Dict[int, List[int]]
    times_sorted: List[int]


def build_indices(samples: List[Sample]) -> Indices:
    """Build indices over `samples` (positions refer to that list)."""
    by_id: Dict[int, List[int]] = {}
    time_to_pos: Dict[int, List[int]] = {}

    # enumerate() yields ascending positions, so every list is born sorted
    for pos, s in enumerate(samples):
        by_id.setdefault(s.object_id, []).append(pos)
        time_to_pos.setdefault(s.time, []).append(pos)

    return Indices(by_id=by_id, time_to_pos=time_to_pos, times_sorted=sorted(time_to_pos))


def window_positions(idx: Indices, start: int, stop: int) -> List[int]:
    """Return sorted positions with time in [start, stop].

    Binary search on `times_sorted`, then merge the position lists.
    """
    lo = bisect_left(idx.times_sorted, start)
    hi = bisect_right(idx.times_sorted, stop)
    out: List[int] = []
    for t in idx.times_sorted[lo:hi]:
        out.extend(idx.time_to_pos[t])
    out.sort()
    return out


def id_positions(idx: Indices, ids: Iterable[int]) -> List[int]:
    """Return sorted positions of samples whose object id is in `ids`."""
    out: List[int] = []
    for i in set(ids):
        out.extend(idx.by_id.get(i, []))
    out.sort()
    return out


def selection_positions(idx: Indices, ids: Iterable[int], start: int, stop: int) -> List[int]:
    """Positions inside the time window whose id is selected, in file order."""
    return intersect_sorted(window_positions(idx, start, stop), id_positions(idx, ids))
