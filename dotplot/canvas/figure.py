from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..colors import WHITE, Color, Palette
from ..config import LayoutConfig, RenderConfig
from ..layout import apply_layout
from ..model import Graph, LayoutAlgorithm
from ..parser import parse_graph
from ..validate import validate
from .axes import Axes
from .svg import format_float

logger = logging.getLogger(__name__)


def subplot_grid(count: int) -> Tuple[int, int]:
    """``(rows, cols)`` for ``count`` subplots, filling columns first."""

    if count <= 0:
        return (0, 0)
    cols = math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)
    return (rows, cols)


class Figure:
    """SVG canvas holding one or more :class:`Axes` laid out on a grid."""

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        *,
        background: Color = WHITE,
        palette: Optional[Palette] = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.background = background
        self.palette = palette
        self.subplots: List[Axes] = []

    def add_subplot(self) -> Axes:
        # Each subplot is drawn at full canvas size and scaled into its cell on output.
        axes = Axes(self.width, self.height, palette=self.palette)
        self.subplots.append(axes)
        return axes

    def add_dot_subplot(
        self,
        text: str,
        layout: LayoutAlgorithm = LayoutAlgorithm.HIERARCHICAL,
        *,
        layout_config: Optional[LayoutConfig] = None,
        render_config: Optional[RenderConfig] = None,
    ) -> Axes:
        """Parse, lay out and render ``text`` into a new subplot.

        Parse and validation errors propagate before any subplot is added.
        """

        from ..render import render_to_axes

        graph: Graph = parse_graph(text)
        validate(graph)
        graph.set_layout(layout)
        apply_layout(graph, config=layout_config)
        axes = self.add_subplot()
        axes.show_frame = False
        if graph.name:
            axes.set_title(graph.name)
        render_to_axes(graph, axes, config=render_config)
        return axes

    def to_svg(self) -> str:
        w, h = format_float(self.width), format_float(self.height)
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
            f'<rect width="100%" height="100%" fill="{self.background.to_svg()}"/>',
        ]
        rows, cols = subplot_grid(len(self.subplots))
        for index, axes in enumerate(self.subplots):
            if len(self.subplots) == 1:
                parts.append(f"<g>\n{axes.to_svg()}\n</g>")
                continue
            row, col = divmod(index, cols)
            sx = 1.0 / cols
            sy = 1.0 / rows
            tx = col * self.width * sx
            ty = row * self.height * sy
            parts.append(
                f'<g transform="translate({format_float(tx)},{format_float(ty)}) '
                f'scale({format_float(sx)},{format_float(sy)})">\n{axes.to_svg()}\n</g>'
            )
        parts.append("</svg>")
        return "\n".join(parts)

    def save_svg(self, path: Union[str, Path]) -> Path:
        target = Path(path)
        target.write_text(self.to_svg(), encoding="utf-8")
        logger.info("Wrote %d subplot(s) to %s", len(self.subplots), target)
        return target
