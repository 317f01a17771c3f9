"""
Layout of polar bars.

Each bar is positioned by its angular position ``p`` and width ``w`` and
by its radial base ``b`` and length ``s``. The layout projects the bar
extents through the axes and builds one SVG path per bar. Blank bars
(non-finite or zero extent after projection) keep the empty path so that
the n-th path always corresponds to the n-th bar.
"""

import logging
import math
from numbers import Real
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .angles import (
    EMPTY_PATH, angle_delta, is_full_circle, path_annulus, rad2deg,
)
from .polygon import (
    _check_vangles, find_enclosing_vertex_angles, path_polygon_annulus,
)

_log = logging.getLogger(__name__)


class BarRecord(NamedTuple):
    """ Raw polar bar datum. """
    p: float  # angular position
    w: float  # angular width
    b: float  # radial base
    s: float  # radial length


class BarLayout(NamedTuple):
    """ Computed geometry of one bar. """
    index: int
    p0: float
    p1: float
    s0: float
    s1: float
    rp0: float
    rp1: float
    thetag0: float
    thetag1: float
    ct: Optional[Tuple[float, float]]
    path: str

    @property
    def is_blank(self):
        return self.path == EMPTY_PATH


def is_numeric(value):
    """ Return ``True`` for finite real numbers. """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, Real) and math.isfinite(value)


def make_path_fn(cxx, cyy, vangles=None):
    """ Select the bar path builder.

    Parameters
    ----------
    cxx, cyy : float
        pixel coordinates of the polar centre
    vangles : sequence of float, optional
        vertex angles (radians) of a polygonal angular grid, circular
        grid if not given

    Returns
    -------
    path_fn : callable
        ``path_fn(r0, r1, a0, a1)`` returning the SVG path of the bar
        with the pixel radii *r0*, *r1* and the angles *a0*, *a1* in
        radians
    """
    if vangles is not None:
        vangles = _check_vangles(vangles)

        def _path_polygon_bar(r0, r1, a0, a1):
            clip = [rad2deg(a0), rad2deg(a1)]
            if is_full_circle(clip):
                # ring following the whole grid polygon
                return path_polygon_annulus(r0, r1, clip, vangles, cxx, cyy)

            # walk the bar in the increasing angle direction
            if angle_delta(a0, a1) <= 0:
                a0, a1 = a1, a0
            a1 = a0 + angle_delta(a0, a1)

            tip = (a0 + a1) / 2
            va0 = find_enclosing_vertex_angles(a0, vangles)[0]
            va1 = find_enclosing_vertex_angles(a1, vangles)[1]
            clip = [rad2deg(a0), rad2deg(a1)]

            return path_polygon_annulus(
                r0, r1, clip, [va0, tip, va1], cxx, cyy)

        return _path_polygon_bar

    def _path_circular_bar(r0, r1, a0, a1):
        return path_annulus(r0, r1, a0, a1, cxx, cyy)

    return _path_circular_bar


def _get_field(bar, name):
    if isinstance(bar, dict):
        return bar.get(name, math.nan)
    return getattr(bar, name, math.nan)


def _as_float(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def layout_bar(index, bar, poffset, radial_axis, angular_axis,
               xaxis, yaxis, path_fn):
    """ Compute the geometry of a single bar.

    Parameters
    ----------
    index : int
        position of the bar in the trace
    bar : `BarRecord`, mapping or object with ``p``, ``w``, ``b``, ``s``
        bar datum
    poffset : float or sequence of float
        angular offset, shared or per bar
    radial_axis : object
        provides ``c2p`` and ``c2g``
    angular_axis : object
        provides ``c2g``
    xaxis, yaxis : object
        provide ``c2p`` used for the label position
    path_fn : callable
        path builder returned by `make_path_fn`

    Returns
    -------
    layout : `BarLayout`
    """
    offset = poffset[index] if np.ndim(poffset) else poffset

    p0 = _as_float(_get_field(bar, "p")) + _as_float(offset)
    p1 = p0 + _as_float(_get_field(bar, "w"))
    s0 = _as_float(_get_field(bar, "b"))
    s1 = s0 + _as_float(_get_field(bar, "s"))

    rp0 = _as_float(radial_axis.c2p(s0))
    rp1 = _as_float(radial_axis.c2p(s1))
    thetag0 = _as_float(angular_axis.c2g(p0))
    thetag1 = _as_float(angular_axis.c2g(p1))

    if (
        not is_numeric(rp0) or not is_numeric(rp1) or
        not is_numeric(thetag0) or not is_numeric(thetag1) or
        rp0 == rp1 or thetag0 == thetag1
    ):
        ct = None
        path = EMPTY_PATH
    else:
        rg1 = _as_float(radial_axis.c2g(s1))
        thetag_mid = (thetag0 + thetag1) / 2
        ct = (
            float(xaxis.c2p(rg1 * math.cos(thetag_mid))),
            float(yaxis.c2p(rg1 * math.sin(thetag_mid))),
        )
        path = path_fn(rp0, rp1, thetag0, thetag1)

    return BarLayout(
        index, p0, p1, s0, s1, rp0, rp1, thetag0, thetag1, ct, path)


def plot_bars(bars, poffset, radial_axis, angular_axis, xaxis, yaxis,
              cxx=0.0, cyy=0.0, vangles=None):
    """ Lay out polar bars.

    Parameters
    ----------
    bars : sequence
        bar data, see `layout_bar`
    poffset : float or sequence of float
        angular offset, shared or per bar
    radial_axis, angular_axis : object
        axis projections, see :mod:`polarpath.axes`
    xaxis, yaxis : object
        Cartesian projections of the label positions
    cxx, cyy : float, optional
        pixel coordinates of the polar centre
    vangles : sequence of float, optional
        vertex angles in degrees of a polygonal angular grid

    Returns
    -------
    layouts : list of `BarLayout`
        one record per bar, in the input order, including blank bars
    """
    if vangles is not None:
        vangles = np.deg2rad(_check_vangles(vangles))
    path_fn = make_path_fn(cxx, cyy, vangles)

    layouts = [
        layout_bar(i, bar, poffset, radial_axis, angular_axis,
                   xaxis, yaxis, path_fn)
        for i, bar in enumerate(bars)
    ]

    n_blank = sum(layout.is_blank for layout in layouts)
    if n_blank:
        _log.debug("%d of %d polar bars left blank", n_blank, len(layouts))

    return layouts
