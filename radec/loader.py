"""
Record loader (text -> Sample list)
===================================

This module reads RA/Dec record files and converts each line into a
`Sample` object.

Record format, one per line:

    <time:int> <object id:int> <right ascension:float> <declination:float>

Key ideas:
- Fields are separated by any run of whitespace (tabs or spaces).
- A line with the wrong number of fields is skipped (hand-edited logs often
  carry stray lines).
- A line with four fields that do not parse as numbers aborts the whole
  parse, so a systematically broken file is not silently half loaded.
- Both policies can be changed through `ParsePolicy`.
- The loader returns a list in file order; it never sorts.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import IO, Iterable, List, Optional
import logging
import re

from .models import Sample

_logger = logging.getLogger(__name__)

SKIP = "skip"
FAIL = "fail"
_POLICIES = (SKIP, FAIL)

INT_MIN = -2**31
INT_MAX = 2**31 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


class RaDecError(Exception):
    """Base class for record loading errors."""


class SampleParseError(RaDecError, ValueError):
    """A record line could not be turned into a Sample.

    `samples` holds what was parsed before the bad line.
    """

    def __init__(self, message: str, *, line_no: int, line: str, samples: List[Sample]):
        super().__init__(message)
        self.line_no = line_no
        self.line = line
        self.samples = samples


class StreamReadError(RaDecError, OSError):
    """Reading the input stream failed part way through.

    `samples` holds the records read before the failure.
    """

    def __init__(self, message: str, *, samples: List[Sample]):
        super().__init__(message)
        self.samples = samples


@dataclass(frozen=True)
class ParsePolicy:
    """What to do with a bad line.

    on_bad_shape: line does not have exactly four fields.
    on_bad_value: line has four fields but one is not a number.
    Each is "skip" (drop the line) or "fail" (raise SampleParseError).
    """
    on_bad_shape: str = SKIP
    on_bad_value: str = FAIL

    def __post_init__(self) -> None:
        for name in ("on_bad_shape", "on_bad_value"):
            if getattr(self, name) not in _POLICIES:
                raise ValueError(f"{name} must be one of {_POLICIES}, got {getattr(self, name)!r}")


def _to_int(tok: str) -> int:
    """Parse a signed 32-bit decimal integer (ASCII digits only)."""
    if not _INT_RE.fullmatch(tok):
        raise ValueError(f"invalid integer: {tok!r}")
    v = int(tok)
    if not INT_MIN <= v <= INT_MAX:
        raise ValueError(f"integer out of 32-bit range: {tok!r}")
    return v


def _to_float(tok: str) -> float:
    """Parse a float; digit grouping and non-ASCII digits are rejected."""
    if "_" in tok or not tok.isascii():
        raise ValueError(f"invalid float: {tok!r}")
    return float(tok)


def _parse_line(line: str, line_no: int, policy: ParsePolicy, samples: List[Sample]) -> Optional[Sample]:
    """Convert one line to a Sample, or return None if the line is skipped."""
    parts = line.split()
    if len(parts) != 4:
        if policy.on_bad_shape == FAIL:
            raise SampleParseError(
                f"line {line_no}: expected 4 fields, got {len(parts)}",
                line_no=line_no, line=line, samples=samples,
            )
        _logger.debug("skipping line %d: %d fields", line_no, len(parts))
        return None
    try:
        return Sample(
            time=_to_int(parts[0]),
            object_id=_to_int(parts[1]),
            right_ascension=_to_float(parts[2]),
            declination=_to_float(parts[3]),
        )
    except ValueError as e:
        if policy.on_bad_value == FAIL:
            raise SampleParseError(
                f"line {line_no}: {e}", line_no=line_no, line=line, samples=samples,
            ) from e
        _logger.debug("skipping line %d: %s", line_no, e)
        return None


def parse(source: IO[str], policy: Optional[ParsePolicy] = None) -> List[Sample]:
    """Read every record from `source` and return them in file order.

    The stream is closed before returning, whatever happens.

    Raises:
        SampleParseError: a line broke a "fail" policy.
        StreamReadError: the stream raised while being read.
    """
    policy = policy or ParsePolicy()
    samples: List[Sample] = []
    line_no = 0
    skipped = 0
    try:
        while True:
            try:
                line = source.readline()
            except (OSError, UnicodeDecodeError) as e:
                raise StreamReadError(
                    f"read failed after line {line_no}: {e}", samples=samples,
                ) from e
            if not line:
                break
            line_no += 1
            sample = _parse_line(line, line_no, policy, samples)
            if sample is None:
                skipped += 1
            else:
                samples.append(sample)
    finally:
        source.close()

    _logger.info("parsed %d samples from %d lines (%d skipped)", len(samples), line_no, skipped)
    return samples


def load_radec_file(path: str, policy: Optional[ParsePolicy] = None) -> List[Sample]:
    """Open a record file and parse it."""
    _logger.info("loading %s", path)
    return parse(open(path, "r", encoding="utf-8"), policy)


def load_files(paths: Iterable[str], policy: Optional[ParsePolicy] = None) -> List[Sample]:
    """Load several record files; their samples are concatenated in order."""
    samples: List[Sample] = []
    for p in paths:
        samples.extend(load_radec_file(p, policy))
    return samples


def dump_samples(samples: Iterable[Sample], out: IO[str]) -> int:
    """Write samples in record format. Returns the number of lines written.

    Floats are written with repr() so parse() reads back the exact values.
    """
    n = 0
    for s in samples:
        out.write("%d\t%d\t%r\t%r\n" % s.as_tuple())
        n += 1
    return n
