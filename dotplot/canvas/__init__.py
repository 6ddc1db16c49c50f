from .axes import Axes, RawFragment, Series, calculate_range, map_range
from .figure import Figure, subplot_grid
from .markers import SHAPE_MARKERS, Marker, marker_svg

__all__ = [
    "Axes",
    "Figure",
    "Marker",
    "RawFragment",
    "SHAPE_MARKERS",
    "Series",
    "calculate_range",
    "map_range",
    "marker_svg",
    "subplot_grid",
]
