"""
Helpers for polar plots with a polygonal angular grid.

The grid is a regular or irregular polygon whose corners sit at the
*vertex angles* (radians, sorted in increasing order). A polygon "of
radius r" is the polygon having its vertices on the circle of radius r.
"""

import math

import numpy as np

from .angles import (
    angle_delta, deg2rad, is_angle_inside_sector, is_full_circle, _fmt,
)

# edge directions below this magnitude are treated as parallel
_TINY = 1e-10


def _check_vangles(vangles):
    vangles = np.asarray(vangles, dtype="float64")
    if vangles.ndim != 1 or vangles.size < 3:
        raise ValueError(
            "vangles must be a sequence of at least 3 vertex angles, "
            f"got {vangles.size}")
    return vangles


def find_index_of_min(values, fn):
    """ Return the index of the element minimising ``fn(element)``. """
    return int(np.argmin([fn(value) for value in values]))


def find_enclosing_vertex_angles(a, vangles):
    """ Find the two consecutive vertex angles enclosing angle *a*.

    Parameters
    ----------
    a : float
        angle in radians
    vangles : sequence of float
        vertex angles in radians, in increasing order

    Returns
    -------
    va0, va1 : float
        lower and upper enclosing vertex angles. An angle sitting exactly
        on a vertex is enclosed by the edge ending at that vertex.
    """
    vangles = _check_vangles(vangles)

    def _delta(v):
        delta = angle_delta(v, a)
        return delta if delta > 0 else np.inf

    i0 = find_index_of_min(vangles, _delta)
    i1 = (i0 + 1) % vangles.size
    return float(vangles[i0]), float(vangles[i1])


def find_intersection_xy(v0, v1, a, r):
    """ Intersection of a ray and a polygon edge.

    Parameters
    ----------
    v0, v1 : float
        angles (radians) of the edge end vertices
    a : float
        ray angle in radians, the ray starts at the centre
    r : float
        polygon radius

    Returns
    -------
    x, y : float
        Cartesian (y up) coordinates of the intersection, NaN if the ray
        is parallel to the edge.
    """
    x0, y0 = r * math.cos(v0), r * math.sin(v0)
    x1, y1 = r * math.cos(v1), r * math.sin(v1)
    dx, dy = math.cos(a), math.sin(a)
    denom = dx * (y1 - y0) - dy * (x1 - x0)
    if abs(denom) < _TINY:
        return math.nan, math.nan
    t = (x0 * y1 - y0 * x1) / denom
    return t * dx, t * dy


def make_polygon(r, sector, vangles):
    """ Vertices of the polygon of radius *r* clipped to the sector.

    Parameters
    ----------
    r : float
        polygon radius
    sector : (float, float)
        clipping sector in degrees, in any order
    vangles : sequence of float
        vertex angles in radians, in increasing order

    Returns
    -------
    vertices : (N, 2) ndarray
        Cartesian (y up) vertices ordered by increasing angle. For a
        partial sector the first and last vertices are the points where
        the sector bounds cross the polygon edges.
    """
    vangles = _check_vangles(vangles)

    if is_full_circle(sector):
        return np.column_stack([r * np.cos(vangles), r * np.sin(vangles)])

    s0, s1 = sorted(sector[:2])
    a_start, a_end = deg2rad(s0), deg2rad(s1)
    span = a_end - a_start

    # vertices strictly inside the sector, sorted by their offset
    offsets = np.mod(vangles - a_start, 2 * np.pi)
    inside = (offsets > 0) & (offsets < span)
    order = np.argsort(offsets[inside])
    inner_angles = vangles[inside][order]

    vertices = [find_intersection_xy(
        *find_enclosing_vertex_angles(a_start, vangles), a_start, r)]
    vertices.extend((r * math.cos(v), r * math.sin(v)) for v in inner_angles)
    vertices.append(find_intersection_xy(
        *find_enclosing_vertex_angles(a_end, vangles), a_end, r))

    return np.asarray(vertices, dtype="float64")


def _to_points(vertices, cx, cy):
    # N.B. svg coordinates, y increases downward
    return [
        "%s,%s" % (_fmt(cx + x), _fmt(cy - y)) for x, y in vertices
    ]


def path_polygon(r, sector, vangles, cx=0, cy=0):
    """ SVG path of a polygonal sector closed at the centre (cx, cy).

    Polygonal counterpart of :func:`polarpath.angles.path_sector`.
    """
    cx = cx or 0
    cy = cy or 0
    points = _to_points(make_polygon(r, sector, vangles), cx, cy)
    if is_full_circle(sector):
        return "M" + "L".join(points) + "Z"
    return "M" + "L".join(points) + "L" + _to_points([(0, 0)], cx, cy)[0] + "Z"


def path_polygon_annulus(r0, r1, sector, vangles, cx=0, cy=0):
    """ SVG path of a polygonal annulus sector.

    Parameters
    ----------
    r0, r1 : float
        radial bounds, in any order
    sector : (float, float)
        clipping sector in degrees, in any order
    vangles : sequence of float
        vertex angles in radians, in increasing order
    cx, cy : float, optional
        coordinates of the centre

    Returns
    -------
    path : str
        one closed contour (outer edge forward, inner edge backward) for
        partial sectors, two closed loops of opposite orientation for
        the full circle
    """
    cx = cx or 0
    cy = cy or 0
    r_start, r_end = (r0, r1) if r0 < r1 else (r1, r0)

    inner = _to_points(make_polygon(r_start, sector, vangles), cx, cy)
    outer = _to_points(make_polygon(r_end, sector, vangles), cx, cy)

    if is_full_circle(sector):
        return (
            "M" + "L".join(outer) + "Z"
            + "M" + "L".join(inner[::-1]) + "Z"
        )
    return "M" + "L".join(outer) + "L" + "L".join(inner[::-1]) + "Z"


def is_pt_inside_polygon(r, a, r_range, sector, vangles):
    """ Return ``True`` if the polar point (r, a) lies inside the polygonal
    annulus sector.

    Parameters
    ----------
    r : float
        radial coordinate of the point
    a : float
        angular coordinate of the point in radians
    r_range : (float, float)
        radii of the inner and outer polygons, in any order
    sector : (float, float)
        sector angles in degrees, in any order
    vangles : sequence of float
        vertex angles in radians, in increasing order
    """
    if not is_angle_inside_sector(a, sector):
        return False
    r0, r1 = sorted(r_range[:2])
    # distance from the centre to the unit polygon edge along the ray
    scale = math.hypot(*find_intersection_xy(
        *find_enclosing_vertex_angles(a, vangles), a, 1.0))
    return r0 * scale <= r <= r1 * scale
