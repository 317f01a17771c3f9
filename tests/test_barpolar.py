"""Tests for :mod:`polarpath.barpolar`."""

import logging
import math
from types import SimpleNamespace

import numpy as np
import pytest
from numpy.testing import assert_allclose

from polarpath.angles import EMPTY_PATH, path_annulus
from polarpath.axes import AngularAxis, CartesianAxis, RadialAxis
from polarpath.barpolar import (
    BarRecord,
    is_numeric,
    layout_bar,
    make_path_fn,
    plot_bars,
)

IDENTITY = SimpleNamespace(c2p=lambda v: v, c2g=lambda v: v)
SQUARE = np.deg2rad([0, 90, 180, 270])


def _loops(path):
    """Split a polygon path into closed loops of screen (x, y) points."""
    return [
        np.array([[float(v) for v in pt.split(",")] for pt in loop.split("L")])
        for loop in path[1:-1].split("ZM")
    ]


def _screen(r, deg):
    a = math.radians(deg)
    return r * math.cos(a), -r * math.sin(a)


def _ray_chord(r, deg, v0, v1):
    """Crossing of the ray at *deg* with the chord between vertices *v0*,
    *v1* of the polygon of radius *r*, in screen coordinates."""
    a, p0, p1 = np.radians([deg, v0, v1])
    start = r * np.array([np.cos(p0), np.sin(p0)])
    end = r * np.array([np.cos(p1), np.sin(p1)])
    # t * ray = start + u * (end - start)
    t, _ = np.linalg.solve(
        np.column_stack([[np.cos(a), np.sin(a)], start - end]), start)
    return t * np.cos(a), -t * np.sin(a)


@pytest.fixture
def axes():
    return dict(
        radial_axis=RadialAxis(range=(0, 3), radius=30),
        angular_axis=AngularAxis(),
        xaxis=CartesianAxis(100, 10),
        yaxis=CartesianAxis(100, -10),
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, True),
        (0.5, True),
        (np.float64(2), True),
        (math.nan, False),
        (math.inf, False),
        (None, False),
        ("1", False),
        (True, False),
    ],
)
def test_is_numeric(value, expected):
    assert is_numeric(value) is expected


def test_identity_projections():
    path_fn = make_path_fn(0, 0)
    layout = layout_bar(
        0, BarRecord(p=0, w=90, b=1, s=2), 0,
        IDENTITY, IDENTITY, IDENTITY, IDENTITY, path_fn)
    assert (layout.p0, layout.p1, layout.s0, layout.s1) == (0, 90, 1, 3)
    assert (layout.rp0, layout.rp1) == (1, 3)
    assert layout.path == path_annulus(1, 3, 0, 90)
    assert layout.ct is not None


def test_quarter_ring(axes):
    layout, = plot_bars([BarRecord(p=0, w=90, b=1, s=2)], 0, **axes)
    assert (layout.p0, layout.p1, layout.s0, layout.s1) == (0, 90, 1, 3)
    assert layout.rp0 == pytest.approx(10)
    assert layout.rp1 == pytest.approx(30)
    assert layout.thetag0 == 0
    assert layout.thetag1 == pytest.approx(math.pi / 2)
    assert layout.path == path_annulus(
        layout.rp0, layout.rp1, layout.thetag0, layout.thetag1)
    assert layout.path.count("A") == 2
    # label at the middle of the outer edge, y axis pointing downward
    offset = 30 * math.cos(math.pi / 4)
    assert layout.ct == pytest.approx((100 + offset, 100 - offset))


def test_centre_offset(axes):
    layout, = plot_bars(
        [BarRecord(p=0, w=90, b=1, s=2)], 0, cxx=50, cyy=60, **axes)
    assert layout.path == path_annulus(
        layout.rp0, layout.rp1, layout.thetag0, layout.thetag1, 50, 60)


@pytest.mark.parametrize(
    "bar",
    [
        BarRecord(p=0, w=90, b=math.nan, s=2),
        BarRecord(p=0, w=90, b=1, s=0),
        BarRecord(p=10, w=0, b=1, s=2),
        BarRecord(p=math.inf, w=10, b=1, s=2),
        {"p": 0, "w": 90, "b": None, "s": 2},
        {"p": 0, "w": 90, "s": 2},
    ],
)
def test_blank_bars(axes, bar):
    layout, = plot_bars([bar], 0, **axes)
    assert layout.path == EMPTY_PATH
    assert layout.ct is None
    assert layout.is_blank


def test_blank_bars_are_kept(axes):
    bars = [
        BarRecord(p=0, w=30, b=0, s=1),
        BarRecord(p=30, w=30, b=0, s=0),
        BarRecord(p=60, w=30, b=0, s=2),
    ]
    layouts = plot_bars(bars, 0, **axes)
    assert [layout.index for layout in layouts] == [0, 1, 2]
    assert [layout.is_blank for layout in layouts] == [False, True, False]


def test_log_radial_axis_blanks_non_positive_bars(axes):
    axes["radial_axis"] = RadialAxis(range=(1, 100), radius=100, scale="log")
    bars = [
        BarRecord(p=0, w=30, b=1, s=9),
        BarRecord(p=30, w=30, b=0, s=10),
        BarRecord(p=60, w=30, b=-5, s=10),
    ]
    layouts = plot_bars(bars, 0, **axes)
    assert layouts[0].rp1 == pytest.approx(50)
    assert layouts[0].ct is not None
    assert [layout.path == EMPTY_PATH for layout in layouts] == [
        False, True, True]


def test_shared_and_per_bar_offsets(axes):
    bars = [BarRecord(p=0, w=10, b=0, s=1), BarRecord(p=20, w=10, b=0, s=1)]

    shared = plot_bars(bars, 5, **axes)
    assert [(layout.p0, layout.p1) for layout in shared] == [(5, 15), (25, 35)]

    per_bar = plot_bars(bars, [1, -2], **axes)
    assert [(layout.p0, layout.p1) for layout in per_bar] == [(1, 11), (18, 28)]

    per_bar = plot_bars(bars, np.array([1.0, -2.0]), **axes)
    assert [layout.p0 for layout in per_bar] == [1, 18]


def test_bar_objects_and_mappings(axes):
    bars = [
        {"p": 0, "w": 45, "b": 0, "s": 2},
        SimpleNamespace(p=0, w=45, b=0, s=2),
    ]
    first, second = plot_bars(bars, 0, **axes)
    assert first.path == second.path
    assert first.path != EMPTY_PATH


def test_polygonal_grid(axes):
    bars = [BarRecord(p=10, w=60, b=1, s=2)]
    layout, = plot_bars(bars, 0, vangles=[0, 90, 180, 270], **axes)
    assert layout.path.startswith("M")
    assert layout.path.endswith("Z")
    assert "A" not in layout.path
    assert layout.ct is not None


def test_polygonal_grid_too_few_vertices(axes):
    with pytest.raises(ValueError):
        plot_bars([BarRecord(p=10, w=60, b=1, s=2)], 0, vangles=[0, 90], **axes)


def test_polygon_path_fn_ignores_angle_order():
    path_fn = make_path_fn(0, 0, np.deg2rad([0, 90, 180, 270]))
    assert path_fn(1, 2, 0.5, 0.2) == path_fn(1, 2, 0.2, 0.5)


def test_polygon_path_fn_across_zero():
    path_fn = make_path_fn(0, 0, np.deg2rad([0, 120, 240]))
    path = path_fn(1, 2, math.radians(350), math.radians(10))
    assert path.count("M") == 1
    assert path.endswith("Z")
    assert "nan" not in path

    loop, = _loops(path)
    assert len(loop) == 6
    # tip of the outer edge sits on the 0 degree vertex
    assert_allclose(loop[1], (2, 0), atol=1e-12)
    assert_allclose(loop[0], _ray_chord(2, 350, 240, 360), atol=1e-12)
    assert_allclose(loop[2], _ray_chord(2, 10, 0, 120), atol=1e-12)


def test_polygon_path_fn_vertices():
    path_fn = make_path_fn(0, 0, SQUARE)
    loop, = _loops(path_fn(1, 2, math.radians(10), math.radians(70)))
    assert len(loop) == 6

    # outer edge: entry point, tip at the middle angle, exit point
    outer = [
        _ray_chord(2, 10, 0, 40),
        _screen(2, 40),
        _ray_chord(2, 70, 40, 90),
    ]
    assert_allclose(loop[:3], outer, atol=1e-12)

    # inner edge, walked backward
    inner = [
        _ray_chord(1, 70, 40, 90),
        _screen(1, 40),
        _ray_chord(1, 10, 0, 40),
    ]
    assert_allclose(loop[3:], inner, atol=1e-12)


def test_polygon_path_fn_full_circle():
    path_fn = make_path_fn(0, 0, SQUARE)
    outer, inner = _loops(path_fn(1, 2, 0, 2 * math.pi))
    assert_allclose(outer, [(2, 0), (0, -2), (-2, 0), (0, 2)], atol=1e-12)
    assert_allclose(inner, [(0, 1), (-1, 0), (0, -1), (1, 0)], atol=1e-12)


def test_polygonal_grid_full_circle(axes):
    layout, = plot_bars(
        [BarRecord(p=0, w=360, b=1, s=2)], 0,
        vangles=[0, 90, 180, 270], **axes)
    assert layout.path.count("M") == 2
    assert layout.path.count("Z") == 2
    assert "A" not in layout.path

    outer, inner = _loops(layout.path)
    assert len(outer) == len(inner) == 4
    # whole square grid polygons at the pixel radii
    assert_allclose(np.hypot(*outer.T).max(), 30)
    assert_allclose(np.hypot(*inner.T).max(), 10)


def test_circular_path_fn():
    path_fn = make_path_fn(3, 4)
    assert path_fn(1, 2, 0, 1) == path_annulus(1, 2, 0, 1, 3, 4)


def test_blank_bars_are_logged(axes, caplog):
    bars = [BarRecord(p=0, w=30, b=0, s=1), BarRecord(p=0, w=30, b=0, s=0)]
    with caplog.at_level(logging.DEBUG, logger="polarpath.barpolar"):
        plot_bars(bars, 0, **axes)
    assert "1 of 2 polar bars left blank" in caplog.text
