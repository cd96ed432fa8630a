"""
Sample store operations
=======================

Pure functions over a list of `Sample` records. None of them modify their
input; each returns a new list or dict.

- get_ids / get_range seed the id selection and the time window.
- filter_by_range / filter_by_id narrow a collection, keeping file order.
- group_by_id / group_by_time split a collection into per-key lists.

Groupings are plain dicts built in ascending key order, so iterating them
walks the keys from smallest to largest. Within a group the samples keep
the order they had in the input.
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Tuple

from .models import Sample

# Start value reported for an empty collection (largest 32-bit int).
# With stop = 0 this gives start > stop, which callers read as "no data".
EMPTY_RANGE_START = 2**31 - 1


def get_ids(samples: Iterable[Sample]) -> List[int]:
    """Return the distinct object ids, ascending."""
    return sorted({s.object_id for s in samples})


def get_range(samples: Iterable[Sample]) -> Tuple[int, int]:
    """Return (start, stop): the smallest and largest sample time.

    An empty collection gives (EMPTY_RANGE_START, 0).
    """
    start = EMPTY_RANGE_START
    stop = 0
    for s in samples:
        if s.time < start:
            start = s.time
        if s.time > stop:
            stop = s.time
    return start, stop


def is_empty_range(start: int, stop: int) -> bool:
    return start > stop


def filter_by_id(samples: Iterable[Sample], ids: Iterable[int]) -> List[Sample]:
    """Keep samples whose object id is in `ids`."""
    wanted = set(ids)
    return [s for s in samples if s.object_id in wanted]


def filter_by_range(samples: Iterable[Sample], start: int, stop: int) -> List[Sample]:
    """Keep samples with start <= time <= stop (empty when start > stop)."""
    return [s for s in samples if start <= s.time <= stop]


def _group(samples: Iterable[Sample], key: Callable[[Sample], int]) -> Dict[int, List[Sample]]:
    groups: Dict[int, List[Sample]] = {}
    for s in samples:
        groups.setdefault(key(s), []).append(s)
    return {k: groups[k] for k in sorted(groups)}


def group_by_id(samples: Iterable[Sample]) -> Dict[int, List[Sample]]:
    """Group samples by object id (ascending ids, stable within a group)."""
    return _group(samples, lambda s: s.object_id)


def group_by_time(samples: Iterable[Sample]) -> Dict[int, List[Sample]]:
    """Group samples by time (ascending times, stable within a group)."""
    return _group(samples, lambda s: s.time)
