"""
   Vector path geometry of polar plots: sectors, annuli and polar bars.
"""

from .angles import (
    EMPTY_PATH,
    angle_delta,
    angle_dist,
    deg2rad,
    is_angle_inside_sector,
    is_full_circle,
    is_pt_inside_sector,
    path_annulus,
    path_arc,
    path_sector,
    rad2deg,
    wrap180,
    wrap360,
)
from .polygon import (
    find_enclosing_vertex_angles,
    is_pt_inside_polygon,
    path_polygon,
    path_polygon_annulus,
)
from .axes import AngularAxis, CartesianAxis, RadialAxis
from .barpolar import BarLayout, BarRecord, layout_bar, make_path_fn, plot_bars

__all__ = [
    "EMPTY_PATH",
    "angle_delta",
    "angle_dist",
    "deg2rad",
    "is_angle_inside_sector",
    "is_full_circle",
    "is_pt_inside_sector",
    "path_annulus",
    "path_arc",
    "path_sector",
    "rad2deg",
    "wrap180",
    "wrap360",
    "find_enclosing_vertex_angles",
    "is_pt_inside_polygon",
    "path_polygon",
    "path_polygon_annulus",
    "AngularAxis",
    "CartesianAxis",
    "RadialAxis",
    "BarLayout",
    "BarRecord",
    "layout_bar",
    "make_path_fn",
    "plot_bars",
]
