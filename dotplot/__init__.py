from .model import Graph, Node, Edge, Subgraph, NodeShape, EdgeStyle, LayoutAlgorithm
from .colors import Color, Palette, parse_color, color_from_name
from .parser import parse_graph, ParseError, EmptyGraphError
from .validate import validate, ValidationError
from .printer import print_graph, format_node, format_edge
from .config import (
    LayoutConfig,
    RenderConfig,
    get_layout_config,
    set_layout_config,
    get_render_config,
    set_render_config,
)
from .layout import apply_layout, compute_layers
from .canvas import Axes, Figure, Marker
from .render import render_to_axes

__all__ = [
    'Graph',
    'Node',
    'Edge',
    'Subgraph',
    'NodeShape',
    'EdgeStyle',
    'LayoutAlgorithm',
    'Color',
    'Palette',
    'parse_color',
    'color_from_name',
    'parse_graph',
    'ParseError',
    'EmptyGraphError',
    'validate',
    'ValidationError',
    'print_graph',
    'format_node',
    'format_edge',
    'LayoutConfig',
    'RenderConfig',
    'get_layout_config',
    'set_layout_config',
    'get_render_config',
    'set_render_config',
    'apply_layout',
    'compute_layers',
    'Axes',
    'Figure',
    'Marker',
    'render_to_axes',
]
