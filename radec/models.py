"""
Data model (Sample)
===================

Each line of a record file is converted into a `Sample` object: the right
ascension and declination of one object at one time.

We keep it immutable (`frozen=True`) so that filters and groupings can share
the same Sample objects between collections without copying them.
"""

from dataclasses import dataclass
import math


def _same_float(a: float, b: float) -> bool:
    """IEEE equality that also tells +0.0 from -0.0 (NaN never matches)."""
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


@dataclass(frozen=True, eq=False)
class Sample:
    """Position of one object at one time."""
    # seconds past an arbitrary start
    time: int
    object_id: int
    # degrees
    right_ascension: float
    declination: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sample):
            return NotImplemented
        return (self.time == other.time
                and self.object_id == other.object_id
                and _same_float(self.right_ascension, other.right_ascension)
                and _same_float(self.declination, other.declination))

    def __hash__(self) -> int:
        return hash((self.time, self.object_id, self.right_ascension, self.declination))

    def as_tuple(self) -> tuple:
        return (self.time, self.object_id, self.right_ascension, self.declination)

    def to_line(self) -> str:
        """Return the record line for this sample (tab separated)."""
        return "%d\t%d\t%f\t%f" % (self.time, self.object_id, self.right_ascension, self.declination)
