"""
Angle helpers and SVG path builders for polar sectors.

Sector boundaries are always expressed in degrees while every angle fed to
the trigonometric functions (and to the path builders) is in radians.
Paths are emitted in screen coordinates, i.e., the y axis increases
downward.
"""

import math

PI = math.pi

# zero-area path used for blank (degenerate) shapes
EMPTY_PATH = "M0,0Z"


def deg2rad(deg):
    """ Convert degrees to radians. """
    return deg / 180 * PI


def rad2deg(rad):
    """ Convert radians to degrees. """
    return rad / PI * 180


def wrap360(deg):
    """ Wrap angle in degrees to the [0, 360) interval. """
    if not math.isfinite(deg):
        return math.nan
    out = math.fmod(deg, 360)
    if out < 0:
        out += 360
        # tiny negative remainders round up to the excluded bound
        if out == 360:
            out = 0.0
    return out


def wrap180(deg):
    """ Wrap angle in degrees to the (-180, 180] interval.

    Angles already within [-180, 180] are returned unchanged.
    """
    if not math.isfinite(deg):
        return math.nan
    if abs(deg) > 180:
        deg -= math.ceil(deg / 360 - 0.5) * 360
    return deg


def is_full_circle(sector):
    """ Return ``True`` if the sector spans exactly 360 degrees.

    Parameters
    ----------
    sector : (float, float)
        sector angles in degrees

    No tolerance is applied, callers must normalize the span to exactly
    360 to get the full circle handling.
    """
    return abs(sector[1] - sector[0]) == 360


def angle_delta(a, b):
    """ Signed shortest angular delta from *a* to *b*.

    Both angles and the result, within (-pi, pi], are in radians.
    """
    d = b - a
    if not math.isfinite(d):
        return math.nan
    return math.atan2(math.sin(d), math.cos(d))


def angle_dist(a, b):
    """ Angular distance between *a* and *b* in radians, within [0, pi]. """
    return abs(angle_delta(a, b))


def is_angle_inside_sector(a, sector):
    """ Return ``True`` if angle lies inside the sector.

    Parameters
    ----------
    a : float
        tested angle in radians
    sector : (float, float)
        sector angles in degrees, in any order

    The bounds are inclusive. They are sorted, so a sector crossing the
    0 degree direction is written with increasing bounds, e.g.
    ``[-10, 10]`` or ``[350, 370]`` (``[350, 10]`` is the same sector as
    ``[10, 350]``).
    """
    if is_full_circle(sector):
        return True

    s0, s1 = sorted(sector[:2])
    s0 = wrap360(s0)
    s1 = wrap360(s1)
    if s0 > s1:
        s1 += 360

    a0 = wrap360(rad2deg(a))
    a1 = a0 + 360

    return (s0 <= a0 <= s1) or (s0 <= a1 <= s1)


def is_pt_inside_sector(r, a, r_range, sector):
    """ Return ``True`` if the polar point (r, a) lies inside the sector.

    Parameters
    ----------
    r : float
        radial coordinate of the point
    a : float
        angular coordinate of the point in radians
    r_range : (float, float)
        radial range of the sector, in any order
    sector : (float, float)
        sector angles in degrees, in any order
    """
    if not is_angle_inside_sector(a, sector):
        return False
    r0, r1 = sorted(r_range[:2])
    return r0 <= r <= r1


def _fmt(value):
    """ Format a number for the SVG path string. """
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _path(r0, r1, a0, a1, cx, cy, close_to_center):
    # shared by path_arc, path_sector and path_annulus
    # r0 is None for arcs and sectors
    cx = cx or 0
    cy = cy or 0

    is_circle = is_full_circle([rad2deg(a0), rad2deg(a1)])

    if is_circle:
        a_start, a_mid, a_end = 0, PI, 2 * PI
    else:
        a_start, a_end = (a0, a1) if a0 < a1 else (a1, a0)

    if r0 is None:
        r_start, r_end = None, r1
    else:
        r_start, r_end = (r0, r1) if r0 < r1 else (r1, r0)

    def pt(r, a):
        # N.B. svg coordinates, y increases downward
        return "%s,%s" % (_fmt(r * math.cos(a) + cx), _fmt(cy - r * math.sin(a)))

    large_arc = 0 if abs(a_end - a_start) <= PI else 1

    def arc(r, a, sweep):
        return "A%s,%s 0,%d,%d %s" % (_fmt(r), _fmt(r), large_arc, sweep, pt(r, a))

    if is_circle:
        if r_start is None:
            return (
                "M" + pt(r_end, a_start)
                + arc(r_end, a_mid, 0) + arc(r_end, a_end, 0) + "Z"
            )
        return (
            "M" + pt(r_start, a_start)
            + arc(r_start, a_mid, 0) + arc(r_start, a_end, 0) + "Z"
            + "M" + pt(r_end, a_start)
            + arc(r_end, a_mid, 1) + arc(r_end, a_end, 1) + "Z"
        )

    if r_start is None:
        path = "M" + pt(r_end, a_start) + arc(r_end, a_end, 0)
        if close_to_center:
            path += "L" + pt(0, 0) + "Z"
        return path

    return (
        "M" + pt(r_start, a_start)
        + "L" + pt(r_end, a_start)
        + arc(r_end, a_end, 0)
        + "L" + pt(r_start, a_end)
        + arc(r_start, a_start, 1) + "Z"
    )


def path_arc(r, a0, a1, cx=0, cy=0):
    """ SVG path of a circular arc.

    Parameters
    ----------
    r : float
        radius
    a0, a1 : float
        angular bounds in radians, in any order
    cx, cy : float, optional
        coordinates of the centre

    Returns
    -------
    path : str
    """
    return _path(None, r, a0, a1, cx, cy, False)


def path_sector(r, a0, a1, cx=0, cy=0):
    """ SVG path of a pie slice closed at the centre (cx, cy).

    See :func:`path_arc` for the parameters.
    """
    return _path(None, r, a0, a1, cx, cy, True)


def path_annulus(r0, r1, a0, a1, cx=0, cy=0):
    """ SVG path of an annulus (ring) sector.

    Parameters
    ----------
    r0, r1 : float
        radial bounds, in any order
    a0, a1 : float
        angular bounds in radians, in any order
    cx, cy : float, optional
        coordinates of the centre

    Returns
    -------
    path : str

    A full circle annulus is made of two closed loops of opposite
    orientation so that the hole is left unfilled.
    """
    return _path(r0, r1, a0, a1, cx, cy, True)
