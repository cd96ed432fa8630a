import pytest

from radec.models import Sample

SCENARIO = (
    "0\t1\t10.0\t20.0\n"
    "0\t2\t11.0\t21.0\n"
    "bad line here\n"
    "5\t1\t12.5\t22.5\n"
    "10\t2\t13.0\t23.0\n"
)


@pytest.fixture
def scenario_text():
    return SCENARIO


@pytest.fixture
def samples():
    return [
        Sample(0, 1, 10.0, 20.0),
        Sample(0, 2, 11.0, 21.0),
        Sample(5, 1, 12.5, 22.5),
        Sample(10, 2, 13.0, 23.0),
        Sample(5, 3, 1.0, -1.0),
        Sample(7, 1, 14.0, 24.0),
    ]


@pytest.fixture
def record_file(tmp_path):
    p = tmp_path / "radec.txt"
    p.write_text(SCENARIO, encoding="utf-8")
    return str(p)
