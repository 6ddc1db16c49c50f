"""Configuration helpers for layout and rendering."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .model import NodeShape


@dataclass
class LayoutConfig:
    circle_radius: float = 0.35
    force_initial_radius: float = 0.25
    force_iterations: int = 10
    force_pull_strength: float = 0.02
    force_bounds: Tuple[float, float] = (0.1, 0.9)
    grid_span: Tuple[float, float] = (0.1, 0.9)
    layer_span: Tuple[float, float] = (0.1, 0.9)
    column_span: Tuple[float, float] = (0.25, 0.75)
    column_spread: float = 0.15
    column_clamp: Tuple[float, float] = (0.05, 0.95)


def _default_node_radii() -> Dict[NodeShape, float]:
    return {
        NodeShape.CIRCLE: 0.05,
        NodeShape.RECTANGLE: 0.06,
        NodeShape.MSQUARE: 0.06,
        NodeShape.DIAMOND: 0.07,
        NodeShape.MDIAMOND: 0.07,
        NodeShape.ELLIPSE: 0.08,
    }


@dataclass
class RenderConfig:
    node_radii: Dict[NodeShape, float] = field(default_factory=_default_node_radii)
    short_edge_threshold: float = 0.1
    curve_strength: float = 0.2
    curve_segments: int = 10
    solid_line_width: float = 2.0
    dotted_line_width: float = 1.5
    arrow_length_px: float = 8.0
    arrow_half_width_px: float = 5.0
    subgraph_padding: float = 0.05
    subgraph_fill_opacity: float = 0.3
    subgraph_default_fill: str = "lightgrey"
    subgraph_border_width: float = 2.0
    subgraph_label_font_size: float = 12.0
    view_padding: float = 0.1
    marker_size: float = 15.0
    large_marker_size: float = 50.0

    def node_radius(self, shape: NodeShape) -> float:
        return self.node_radii.get(shape, 0.08)


_LAYOUT_CONFIG = LayoutConfig()
_RENDER_CONFIG = RenderConfig()


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)


def get_render_config() -> RenderConfig:
    return copy.deepcopy(_RENDER_CONFIG)


def set_render_config(config: RenderConfig) -> None:
    global _RENDER_CONFIG
    _RENDER_CONFIG = copy.deepcopy(config)
