import math

import pytest

from radec import store
from radec.chart import AxisBounds, ChartConfig, data_extent, render_scatter, series_xy
from radec.models import Sample


def test_series_xy(samples):
    xy = series_xy(store.group_by_id(samples))
    assert xy[1] == ([10.0, 12.5, 14.0], [20.0, 22.5, 24.0])
    assert list(xy) == [1, 2, 3]


def test_data_extent_skips_non_finite():
    groups = {1: [Sample(0, 1, 1.0, 2.0), Sample(1, 1, float("nan"), 5.0), Sample(2, 1, 3.0, float("inf"))]}
    assert data_extent(groups) == ((1.0, 3.0), (2.0, 5.0))
    assert data_extent({}) is None


def test_axis_bounds_only_grow():
    b = AxisBounds()
    b.extend((0.0, 10.0), (-5.0, 5.0))
    b.extend((2.0, 3.0), (-1.0, 1.0))
    assert b.x == (0.0, 10.0)
    assert b.y == (-5.0, 5.0)
    b.extend((-1.0, 4.0), (0.0, 6.0))
    assert b.x == (-1.0, 10.0)
    assert b.y == (-5.0, 6.0)


def test_render_scatter_writes_png(tmp_path, samples):
    pytest.importorskip("matplotlib")
    bounds = AxisBounds()
    out = render_scatter(store.group_by_id(samples), str(tmp_path / "c.png"),
                         config=ChartConfig(margin=0.0), bounds=bounds)
    assert (tmp_path / "c.png").stat().st_size > 0
    assert out.endswith("c.png")
    assert bounds.x == (1.0, 14.0)
    assert bounds.y == (-1.0, 24.0)

    # a narrower plot keeps the earlier axes
    render_scatter(store.group_by_id(samples[:2]), str(tmp_path / "d.png"),
                   config=ChartConfig(margin=0.0), bounds=bounds)
    assert bounds.x == (1.0, 14.0)


def test_render_empty_chart(tmp_path):
    pytest.importorskip("matplotlib")
    render_scatter({}, str(tmp_path / "empty.png"))
    assert (tmp_path / "empty.png").exists()


def test_single_point_gets_visible_box():
    (x, y) = data_extent({1: [Sample(0, 1, 0.0, 0.0)]}, margin=0.5)
    assert x == (-0.5, 0.5)
    assert not math.isnan(y[0])


def test_single_value_extent_is_never_zero_width():
    groups = {1: [Sample(0, 1, 10.0, -4.0), Sample(1, 1, 10.0, -4.0)]}
    x, y = data_extent(groups, margin=0.0)
    assert x == (5.0, 15.0)
    assert y == (-6.0, -2.0)
