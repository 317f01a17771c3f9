"""
Axis projections consumed by the bar layout.

The layout only relies on the following duck-typed methods:

- radial axis: ``c2p(value)`` (data to pixel radius) and ``c2g(value)``
  (data to the normalized radial unit of the angular grid),
- angular axis: ``c2g(value)`` (data to angle in radians),
- Cartesian axes: ``c2p(value)`` (grid coordinate to pixel).

The classes below are plain implementations of these capabilities. They
accept scalars as well as arrays.
"""

import numpy as np

from matplotlib import _api
import matplotlib.scale as mscale


class RadialAxis:
    """ Radial axis mapping data values to radii.

    Parameters
    ----------
    range : (float, float)
        data values placed at the centre and at the outer edge
    radius : float
        pixel radius of the outer edge
    scale : str, optional
        name of a matplotlib scale, e.g. "linear" or "log"
    **scale_kwargs
        extra keyword arguments passed to the matplotlib scale

    Values outside the scale domain (e.g. non-positive values of a log
    scale) are projected to non-finite numbers.
    """
    scale = "linear"

    def __init__(self, range=(0.0, 1.0), radius=1.0, scale=None,
                 **scale_kwargs):
        if scale is not None:
            self.scale = scale
        if self.scale == "log":
            scale_kwargs.setdefault("nonpositive", "mask")
        self._transform = mscale.scale_factory(
            self.scale, None, **scale_kwargs).get_transform()
        self.range = tuple(range)
        self.radius = radius

        l0, l1 = self.c2l(self.range[0]), self.c2l(self.range[1])
        if not np.isfinite(l0) or not np.isfinite(l1) or l0 == l1:
            raise ValueError(
                f"invalid radial range {self.range!r} for the "
                f"{self.scale!r} scale")
        self._l0 = l0
        self._pixel_scale = radius / (l1 - l0)

    def c2l(self, value):
        """ Convert data value to the linearized (scaled) value. """
        return self._transform.transform(np.asarray(value, dtype="float64"))

    def c2g(self, value):
        """ Convert data value to the normalized radial grid unit. """
        return self.c2l(value) - self._l0

    def c2p(self, value):
        """ Convert data value to pixel radius. """
        return self.c2g(value) * self._pixel_scale


class AngularAxis:
    """ Angular axis mapping data values to angles in radians.

    Parameters
    ----------
    theta_offset : float, optional
        location of zero, in the theta angular units
    theta_direction : {1, -1, "counterclockwise", "clockwise"}, optional
        direction in which theta increases
    theta_max : float, optional
        full circle in the theta angular units (360 for degrees,
        24 for hours)
    """
    theta_max = 360 # degrees
    theta_offset = 0.0
    theta_direction = 1

    def __init__(self, theta_offset=None, theta_direction=None,
                 theta_max=None):
        if theta_max is not None:
            self.theta_max = theta_max
        if theta_offset is not None:
            self.theta_offset = theta_offset
        self.set_theta_direction(
            self.theta_direction if theta_direction is None else
            theta_direction
        )

    def units2radians(self, value):
        """ Convert theta angular units to radians. """
        return value * 2.0 * np.pi / self.theta_max

    def radians2units(self, value):
        """ Convert radians to theta angular units. """
        return value * self.theta_max * 0.5 / np.pi

    def set_theta_direction(self, direction):
        """
        Set the direction in which theta increases.

        clockwise, -1:
           Theta increases in the clockwise direction

        counterclockwise, anticlockwise, 1:
           Theta increases in the counterclockwise direction
        """
        if direction in ('clockwise', -1):
            self.theta_direction = -1
        elif direction in ('counterclockwise', 'anticlockwise', 1):
            self.theta_direction = 1
        else:
            _api.check_in_list(
                [-1, 1, 'clockwise', 'counterclockwise', 'anticlockwise'],
                direction=direction)

    def set_theta_zero_location(self, loc, offset=0.0):
        """
        Set the location of theta's zero.

        Parameters
        ----------
        loc : str
            May be one of "N", "NW", "W", "SW", "S", "SE", "E", or "NE".
        offset : float, default: 0
            An offset in degrees to apply from the specified *loc*.
        """
        mapping = {
            'E': 0,
            'NE': 0.125,
            'N': 0.25,
            'NW': 0.375,
            'W': 0.5,
            'SW': 0.625,
            'S': 0.75,
            'SE': 0.875}
        _api.check_in_list(mapping, loc=loc)
        self.theta_offset = self.theta_max * (mapping[loc] + offset/360.0)

    def c2g(self, value):
        """ Convert data value to angle in radians. """
        value = np.asarray(value, dtype="float64")
        return self.units2radians(
            self.theta_offset + self.theta_direction * value)


class CartesianAxis:
    """ Linear mapping of a Cartesian grid coordinate to pixels.

    Use a negative *scale* for a screen y axis pointing downward.
    """

    def __init__(self, offset=0.0, scale=1.0):
        self.offset = offset
        self.scale = scale

    def c2p(self, value):
        return self.offset + self.scale * np.asarray(value, dtype="float64")
