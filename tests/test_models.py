import pytest

from radec.models import Sample


def test_equality_is_structural():
    assert Sample(1, 2, 3.0, 4.0) == Sample(1, 2, 3.0, 4.0)
    assert Sample(1, 2, 3.0, 4.0) != Sample(1, 2, 3.0, 4.5)
    assert Sample(1, 2, 3.0, 4.0) != Sample(1, 3, 3.0, 4.0)


def test_nan_never_equal():
    nan = float("nan")
    s = Sample(0, 1, nan, 0.0)
    assert s != Sample(0, 1, nan, 0.0)
    assert s != s


def test_signed_zero_distinguished():
    assert Sample(0, 1, 0.0, 1.0) != Sample(0, 1, -0.0, 1.0)


def test_hash_consistent_with_equality():
    assert len({Sample(1, 2, 3.0, 4.0), Sample(1, 2, 3.0, 4.0)}) == 1


def test_to_line_format():
    assert Sample(120, 3, 10.5, -5.25).to_line() == "120\t3\t10.500000\t-5.250000"


def test_frozen():
    s = Sample(1, 2, 3.0, 4.0)
    with pytest.raises(AttributeError):
        s.time = 5
