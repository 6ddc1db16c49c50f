"""Colour values, name lookups and the series palette."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: float = 1.0

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        raw = text.strip().lstrip("#")
        if len(raw) != 6:
            raise ValueError(f"hex colour must have 6 digits, got {text!r}")
        try:
            return cls(int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))
        except ValueError as exc:
            raise ValueError(f"invalid hex colour {text!r}") from exc

    def to_svg(self) -> str:
        if self.a < 1.0:
            return f"rgba({self.r},{self.g},{self.b},{self.a})"
        return f"rgb({self.r},{self.g},{self.b})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 128, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)
ORANGE = Color(255, 165, 0)
PURPLE = Color(128, 0, 128)
GRAY = Color(128, 128, 128)
LIGHTGRAY = Color(211, 211, 211)
AXIS_COLOR = Color(77, 77, 77)

# Colours understood by the graph language; anything else falls back to black.
GRAPH_COLORS: Dict[str, Color] = {
    "red": RED,
    "blue": BLUE,
    "green": GREEN,
    "white": WHITE,
    "black": BLACK,
    "lightgrey": GRAY,
    "lightgray": GRAY,
}

CHART_COLORS: Dict[str, Color] = {
    "black": BLACK,
    "k": BLACK,
    "white": WHITE,
    "w": WHITE,
    "red": RED,
    "r": RED,
    "green": GREEN,
    "g": GREEN,
    "blue": BLUE,
    "b": BLUE,
    "yellow": YELLOW,
    "y": YELLOW,
    "cyan": CYAN,
    "c": CYAN,
    "magenta": MAGENTA,
    "m": MAGENTA,
    "orange": ORANGE,
    "purple": PURPLE,
    "gray": GRAY,
    "grey": GRAY,
    "lightgray": LIGHTGRAY,
    "lightgrey": LIGHTGRAY,
}

# Border colours for subgraph outlines keyed by the declared subgraph colour.
SUBGRAPH_BORDER_COLORS: Dict[str, Color] = {
    "lightgrey": GRAY,
    "blue": BLUE,
}

DEFAULT_CYCLE: Tuple[Color, ...] = (
    Color(31, 119, 180),
    Color(255, 127, 14),
    Color(44, 160, 44),
    Color(214, 39, 40),
    Color(148, 103, 189),
    Color(140, 86, 75),
    Color(227, 119, 194),
    Color(127, 127, 127),
    Color(188, 189, 34),
    Color(23, 190, 207),
)


def parse_color(text: Optional[str]) -> Color:
    """Map a graph-language colour name to a colour (unknown names give black)."""

    if not text:
        return BLACK
    return GRAPH_COLORS.get(text.strip().strip('"').lower(), BLACK)


def color_name(color: Color) -> Optional[str]:
    """Reverse lookup into the graph-language colour table."""

    for name, value in GRAPH_COLORS.items():
        if value == color:
            return name
    return None


def color_from_name(text: str) -> Color:
    """Chart-level colour lookup: named colours or ``#rrggbb``."""

    key = text.strip()
    if key.startswith("#"):
        try:
            return Color.from_hex(key)
        except ValueError:
            return BLACK
    return CHART_COLORS.get(key.lower(), BLACK)


_KEYWORD_RE = re.compile(r"^[A-Za-z]+$")


def svg_paint(text: str) -> str:
    """SVG paint value for a declared colour.

    Known names and ``#rrggbb`` resolve through :func:`color_from_name`; any
    other alphabetic name is passed through as an SVG colour keyword.
    """

    key = text.strip().strip('"')
    if key.startswith("#") or key.lower() in CHART_COLORS or not _KEYWORD_RE.match(key):
        return color_from_name(key).to_svg()
    return key.lower()


def subgraph_border_color(declared: Optional[str]) -> Color:
    if not declared:
        return BLACK
    return SUBGRAPH_BORDER_COLORS.get(declared.strip().lower(), BLACK)


class Palette:
    """Colour cycle indexed by an explicit series count."""

    def __init__(self, colors: Sequence[Color] = DEFAULT_CYCLE) -> None:
        if not colors:
            raise ValueError("palette needs at least one colour")
        self._colors = tuple(colors)

    def __len__(self) -> int:
        return len(self._colors)

    def color_for(self, index: int) -> Color:
        return self._colors[index % len(self._colors)]
