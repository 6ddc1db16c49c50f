"""Minimal chart axes: an ordered draw list mapped from data space to pixels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..colors import AXIS_COLOR, WHITE, Color, Palette
from .markers import Marker, marker_svg
from .svg import escape_text, format_float, format_points

Range = Tuple[float, float]


def calculate_range(values: Sequence[float]) -> Range:
    """Min/max of ``values``; a degenerate range is widened so it can be mapped."""

    data = np.asarray(values, dtype=float)
    if data.size == 0:
        return (0.0, 1.0)
    lo, hi = float(data.min()), float(data.max())
    if lo == hi:
        pad = 1.0 if lo == 0.0 else abs(lo) * 0.1
        lo, hi = lo - pad, hi + pad
    return (lo, hi)


def map_range(value: float, from_min: float, from_max: float, to_min: float, to_max: float) -> float:
    if from_max == from_min:
        return to_min
    t = (value - from_min) / (from_max - from_min)
    return to_min + (to_max - to_min) * t


@dataclass
class Series:
    kind: str
    x: np.ndarray
    y: np.ndarray
    color: Optional[Color] = None
    line_width: float = 1.5
    marker: Marker = Marker.NONE
    marker_size: float = 6.0
    label: Optional[str] = None

    def __post_init__(self) -> None:
        self.x = np.asarray(self.x, dtype=float).ravel()
        self.y = np.asarray(self.y, dtype=float).ravel()
        if self.x.shape != self.y.shape:
            raise ValueError(f"x and y must have the same length, got {self.x.size} and {self.y.size}")
        if self.kind not in ("line", "scatter"):
            raise ValueError(f"unknown series kind {self.kind!r}")


@dataclass
class RawFragment:
    """Pre-rendered SVG already expressed in the axes' pixel frame."""

    svg: str


Artist = Union[Series, RawFragment]


class Axes:
    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        *,
        margin: float = 60.0,
        palette: Optional[Palette] = None,
        background: Color = WHITE,
    ) -> None:
        if width <= 2 * margin or height <= 2 * margin:
            raise ValueError("axes are too small for their margins")
        self.width = float(width)
        self.height = float(height)
        self.margin = float(margin)
        self.palette = palette or Palette()
        self.background = background
        self.artists: List[Artist] = []
        self.xlim: Optional[Range] = None
        self.ylim: Optional[Range] = None
        self.title: Optional[str] = None
        self.show_frame = True

    @property
    def plot_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def plot_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def series(self) -> List[Series]:
        return [artist for artist in self.artists if isinstance(artist, Series)]

    @property
    def fragments(self) -> List[str]:
        return [artist.svg for artist in self.artists if isinstance(artist, RawFragment)]

    def _add_series(self, series: Series) -> Series:
        if series.color is None:
            series.color = self.palette.color_for(len(self.series))
        self.artists.append(series)
        return series

    def plot(self, x, y, *, color: Optional[Color] = None, line_width: float = 1.5,
             label: Optional[str] = None) -> Series:
        return self._add_series(Series("line", x, y, color=color, line_width=line_width, label=label))

    def scatter(self, x, y, *, color: Optional[Color] = None, marker: Marker = Marker.CIRCLE,
                marker_size: float = 6.0, label: Optional[str] = None) -> Series:
        return self._add_series(
            Series("scatter", x, y, color=color, marker=marker, marker_size=marker_size, label=label)
        )

    def add_svg_element(self, fragment: str) -> None:
        self.artists.append(RawFragment(fragment))

    def set_xlim(self, lo: float, hi: float) -> None:
        self.xlim = (float(lo), float(hi))

    def set_ylim(self, lo: float, hi: float) -> None:
        self.ylim = (float(lo), float(hi))

    def set_title(self, title: str) -> None:
        self.title = title

    def data_ranges(self) -> Tuple[Range, Range]:
        if self.xlim is not None and self.ylim is not None:
            return (self.xlim, self.ylim)
        series = self.series
        xs = np.concatenate([s.x for s in series]) if series else np.zeros(0)
        ys = np.concatenate([s.y for s in series]) if series else np.zeros(0)
        return (self.xlim or calculate_range(xs), self.ylim or calculate_range(ys))

    def to_pixel(self, x: float, y: float) -> Tuple[float, float]:
        """Map a data point to absolute pixels, flipping Y so larger values sit higher."""

        (x_min, x_max), (y_min, y_max) = self.data_ranges()
        px = self.margin + map_range(x, x_min, x_max, 0.0, self.plot_width)
        py = self.margin + map_range(y, y_min, y_max, self.plot_height, 0.0)
        return (px, py)

    def _series_svg(self, series: Series) -> str:
        color = (series.color or AXIS_COLOR).to_svg()
        points = [self.to_pixel(x, y) for x, y in zip(series.x, series.y)]
        if series.kind == "line":
            body = (
                f'<polyline points="{format_points(points)}" fill="none" stroke="{color}" '
                f'stroke-width="{format_float(series.line_width)}"/>'
            )
        else:
            body = "".join(marker_svg(series.marker, px, py, series.marker_size, color) for px, py in points)
        if series.label:
            return f"<g><title>{escape_text(series.label)}</title>{body}</g>"
        return body

    def to_svg(self) -> str:
        parts = [
            f'<rect x="{format_float(self.margin)}" y="{format_float(self.margin)}" '
            f'width="{format_float(self.plot_width)}" height="{format_float(self.plot_height)}" '
            f'fill="{self.background.to_svg()}"/>'
        ]
        for artist in self.artists:
            if isinstance(artist, Series):
                parts.append(self._series_svg(artist))
            else:
                parts.append(artist.svg)
        if self.show_frame:
            parts.append(
                f'<rect x="{format_float(self.margin)}" y="{format_float(self.margin)}" '
                f'width="{format_float(self.plot_width)}" height="{format_float(self.plot_height)}" '
                f'fill="none" stroke="{AXIS_COLOR.to_svg()}" stroke-width="0.8"/>'
            )
        if self.title:
            parts.append(
                f'<text x="{format_float(self.width / 2)}" y="30" text-anchor="middle" font-size="20" '
                f'font-weight="bold">{escape_text(self.title)}</text>'
            )
        return "\n".join(parts)
