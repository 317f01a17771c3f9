"""
Conversion of the SVG path strings to matplotlib paths and patches.

Only the absolute ``M``, ``L``, ``A`` and ``Z`` commands produced by
:mod:`polarpath.angles` and :mod:`polarpath.polygon` are understood.
Arcs must be circular (equal radii) and not rotated. The coordinates are
kept as they are, i.e., in the screen orientation with y pointing
downward; invert the y axis of the matplotlib Axes to get the expected
picture.
"""

import math
import re

import numpy as np

import matplotlib.patches as mpatches
from matplotlib.path import Path

# number of line segments per half turn of a flattened arc
ARC_STEPS = 32

_COMMAND_RE = re.compile(r"([A-Z])([^A-Z]*)")
_NUMBER_RE = re.compile(
    r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+]?(?:nan|inf)")
_NARGS = {"M": 2, "L": 2, "A": 7, "Z": 0}


def _parse(d):
    for match in _COMMAND_RE.finditer(d):
        command, args = match.groups()
        if command not in _NARGS:
            raise ValueError(f"unsupported path command {command!r} in {d!r}")
        values = [float(v) for v in _NUMBER_RE.findall(args)]
        if len(values) != _NARGS[command]:
            raise ValueError(
                f"path command {command!r} expects {_NARGS[command]} "
                f"numbers, got {len(values)} in {d!r}")
        yield command, values


def _arc_vertices(start, end, r, large_arc, sweep, steps):
    """ Flatten SVG circular arc into vertices (start point excluded). """
    (x1, y1), (x2, y2) = start, end
    x1p, y1p = (x1 - x2) / 2, (y1 - y2) / 2
    d2 = x1p**2 + y1p**2
    if d2 == 0:
        return np.empty((0, 2))

    # scale up radii too small to join the end points
    r = max(abs(r), math.sqrt(d2))
    coef = math.sqrt(max(0.0, (r**2 - d2) / d2))
    if large_arc == sweep:
        coef = -coef
    cxp, cyp = coef * y1p, -coef * x1p
    cx, cy = cxp + (x1 + x2) / 2, cyp + (y1 + y2) / 2

    theta1 = math.atan2(y1p - cyp, x1p - cxp)
    theta2 = math.atan2(-y1p - cyp, -x1p - cxp)
    dtheta = theta2 - theta1
    if sweep and dtheta < 0:
        dtheta += 2 * np.pi
    elif not sweep and dtheta > 0:
        dtheta -= 2 * np.pi

    nseg = max(1, int(math.ceil(steps * abs(dtheta) / np.pi)))
    theta = theta1 + dtheta * np.linspace(0, 1, nseg + 1)[1:]
    vertices = np.column_stack([
        cx + r * np.cos(theta), cy + r * np.sin(theta)
    ])
    vertices[-1] = end
    return vertices


def path_to_mpl(d, steps=ARC_STEPS):
    """ Convert an SVG path string to a matplotlib path.

    Parameters
    ----------
    d : str
        SVG path made of absolute M, L, A and Z commands
    steps : int, optional
        number of line segments per half turn of a flattened arc

    Returns
    -------
    path : `matplotlib.path.Path`
    """
    vertices = []
    codes = []
    current = start = (0.0, 0.0)

    for command, values in _parse(d):
        if command == "M":
            current = start = tuple(values)
            vertices.append(current)
            codes.append(Path.MOVETO)
        elif command == "L":
            current = tuple(values)
            vertices.append(current)
            codes.append(Path.LINETO)
        elif command == "A":
            rx, ry, _, large_arc, sweep, x, y = values
            if rx != ry:
                raise ValueError(f"elliptic arcs are not supported: {d!r}")
            arc = _arc_vertices(
                current, (x, y), rx, int(large_arc), int(sweep), steps)
            vertices.extend(map(tuple, arc))
            codes.extend([Path.LINETO] * len(arc))
            current = (x, y)
        else:  # Z
            vertices.append(start)
            codes.append(Path.CLOSEPOLY)
            current = start

    if not vertices:
        raise ValueError("empty path")

    return Path(np.asarray(vertices, dtype="float64"), codes)


def bar_patches(layouts, steps=ARC_STEPS, **kwargs):
    """ Create one patch per bar layout.

    Parameters
    ----------
    layouts : sequence of `polarpath.barpolar.BarLayout`
        bar layouts; blank bars get an empty patch
    steps : int, optional
        number of line segments per half turn of a flattened arc

    Returns
    -------
    patches : list of `matplotlib.patches.PathPatch`

    Other Parameters
    ----------------
    **kwargs
        *kwargs* are optional `matplotlib.patches.Patch` properties.
    """
    return [
        mpatches.PathPatch(path_to_mpl(layout.path, steps), **kwargs)
        for layout in layouts
    ]
