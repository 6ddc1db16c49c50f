from .geometry import arrowhead_points, bounding_box, clip_to_boundaries, curve_points
from .renderer import render_to_axes

__all__ = [
    "arrowhead_points",
    "bounding_box",
    "clip_to_boundaries",
    "curve_points",
    "render_to_axes",
]
