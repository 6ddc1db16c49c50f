"""Marker glyphs for point series."""

from enum import Enum
from typing import Dict

from ..model import NodeShape
from .svg import format_float as _f
from .svg import format_points


class Marker(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"
    TRIANGLE_UP = "triangle_up"
    ELLIPSE = "ellipse"
    MDIAMOND = "mdiamond"
    MSQUARE = "msquare"
    NONE = "none"


SHAPE_MARKERS: Dict[NodeShape, Marker] = {
    NodeShape.CIRCLE: Marker.CIRCLE,
    NodeShape.RECTANGLE: Marker.SQUARE,
    NodeShape.DIAMOND: Marker.DIAMOND,
    NodeShape.ELLIPSE: Marker.ELLIPSE,
    NodeShape.MDIAMOND: Marker.MDIAMOND,
    NodeShape.MSQUARE: Marker.MSQUARE,
}


def _stroke_line(x1: float, y1: float, x2: float, y2: float) -> str:
    return f'<polyline fill="none" stroke="black" points="{format_points([(x1, y1), (x2, y2)])}"/>'


def marker_svg(marker: Marker, x: float, y: float, size: float, color: str) -> str:
    """SVG element for one marker centred on pixel position ``(x, y)``."""

    half = size / 2.0
    if marker is Marker.NONE:
        return ""
    if marker is Marker.CIRCLE:
        return f'<circle cx="{_f(x)}" cy="{_f(y)}" r="{_f(half)}" fill="{color}"/>'
    if marker is Marker.SQUARE:
        return (
            f'<rect x="{_f(x - half)}" y="{_f(y - half)}" width="{_f(size)}" '
            f'height="{_f(size)}" fill="{color}"/>'
        )
    if marker is Marker.DIAMOND:
        pts = [(x, y - half), (x + half, y), (x, y + half), (x - half, y)]
        return f'<polygon points="{format_points(pts)}" fill="{color}"/>'
    if marker is Marker.TRIANGLE_UP:
        h = half * 0.866
        pts = [(x, y - h), (x - half, y + h), (x + half, y + h)]
        return f'<polygon points="{format_points(pts)}" fill="{color}"/>'
    if marker is Marker.ELLIPSE:
        # 3:2 aspect, rx=27/ry=18 at the default node size of 15
        return (
            f'<ellipse cx="{_f(x)}" cy="{_f(y)}" rx="{_f(half * 3.6)}" '
            f'ry="{_f(half * 2.4)}" fill="{color}"/>'
        )
    if marker is Marker.MDIAMOND:
        w = half * 2.6
        h = half * 1.2
        outline = [(x, y - h), (x + w, y), (x, y + h), (x - w, y), (x, y - h)]
        ticks = "".join(
            [
                _stroke_line(x - w * 0.6, y - h * 0.5, x - w * 0.6, y),
                _stroke_line(x - w * 0.2, y - h * 0.8, x + w * 0.2, y - h * 0.8),
                _stroke_line(x + w * 0.6, y, x + w * 0.6, y + h * 0.5),
                _stroke_line(x + w * 0.2, y + h * 0.8, x - w * 0.2, y + h * 0.8),
            ]
        )
        return f'<g><polygon points="{format_points(outline)}" fill="none" stroke="{color}"/>{ticks}</g>'
    if marker is Marker.MSQUARE:
        s = half
        cut = s * 0.3
        outline = [
            (x - s + cut, y - s),
            (x + s - cut, y - s),
            (x + s, y - s + cut),
            (x + s, y + s - cut),
            (x + s - cut, y + s),
            (x - s + cut, y + s),
            (x - s, y + s - cut),
            (x - s, y - s + cut),
        ]
        ticks = "".join(
            [
                _stroke_line(x - s + cut * 2.0, y - s, x - s, y - s + cut * 2.0),
                _stroke_line(x - s, y - cut, x - s + cut, y),
                _stroke_line(x + s - cut, y, x + s, y - cut),
                _stroke_line(x + s, y + s - cut * 2.0, x + s - cut * 2.0, y + s),
            ]
        )
        return f'<g><polygon points="{format_points(outline)}" fill="none" stroke="{color}"/>{ticks}</g>'
    raise ValueError(f"unsupported marker {marker!r}")
