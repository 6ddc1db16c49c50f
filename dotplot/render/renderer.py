"""Draw a positioned graph into an :class:`~dotplot.canvas.axes.Axes`.

Back to front: filled subgraph backgrounds, edges with their arrowheads,
node markers, then subgraph borders and labels.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from ..canvas.axes import Axes, calculate_range
from ..canvas.markers import SHAPE_MARKERS, Marker
from ..canvas.svg import escape_text, format_float, format_points
from ..colors import subgraph_border_color, svg_paint
from ..config import RenderConfig, get_render_config
from ..model import Edge, EdgeStyle, Graph, Node, NodeShape, Subgraph
from .geometry import arrowhead_points, bounding_box, box_corners, clip_to_boundaries, curve_points, unit_direction

logger = logging.getLogger(__name__)

_LARGE_SHAPES = (NodeShape.MDIAMOND, NodeShape.MSQUARE)


def _fix_limits(graph: Graph, axes: Axes, config: RenderConfig) -> None:
    xs = [node.x for node in graph.nodes.values()]
    ys = [node.y for node in graph.nodes.values()]
    pad = config.view_padding
    if axes.xlim is None:
        lo, hi = calculate_range(xs) if xs else (0.0, 1.0)
        axes.set_xlim(lo - pad, hi + pad)
    if axes.ylim is None:
        lo, hi = calculate_range(ys) if ys else (0.0, 1.0)
        axes.set_ylim(lo - pad, hi + pad)


def _radius_px(axes: Axes, radius: float) -> float:
    """Average of the radius mapped through both axis scales."""

    (x_min, x_max), (y_min, y_max) = axes.data_ranges()
    rx = radius * axes.plot_width / (x_max - x_min) if x_max != x_min else 0.0
    ry = radius * axes.plot_height / (y_max - y_min) if y_max != y_min else 0.0
    return (rx + ry) / 2.0


def _subgraph_box(graph: Graph, subgraph: Subgraph, pad: float) -> Optional[Tuple[float, float, float, float]]:
    members = [graph.nodes[node_id].position for node_id in subgraph.nodes if node_id in graph.nodes]
    return bounding_box(members, pad)


def _draw_background(graph: Graph, subgraph: Subgraph, axes: Axes, config: RenderConfig) -> bool:
    if not subgraph.filled:
        return False
    box = _subgraph_box(graph, subgraph, config.subgraph_padding)
    if box is None:
        return False
    fill = svg_paint(subgraph.fill_color or config.subgraph_default_fill)
    corners = [axes.to_pixel(x, y) for x, y in box_corners(box)]
    axes.add_svg_element(
        f'<polygon points="{format_points(corners)}" fill="{fill}" '
        f'fill-opacity="{format_float(config.subgraph_fill_opacity)}" stroke="none"/>'
    )
    return True


def _draw_edge(edge: Edge, source: Node, target: Node, axes: Axes, config: RenderConfig) -> None:
    start, end = clip_to_boundaries(
        source.position,
        target.position,
        config.node_radius(source.shape),
        config.node_radius(target.shape),
    )
    points = curve_points(
        start,
        end,
        strength=config.curve_strength,
        segments=config.curve_segments,
        threshold=config.short_edge_threshold,
    )
    width = config.dotted_line_width if edge.style is EdgeStyle.DOTTED else config.solid_line_width
    axes.plot(points[:, 0], points[:, 1], color=edge.color, line_width=width, label=edge.label)

    if not edge.directed:
        return
    source_px = axes.to_pixel(source.x, source.y)
    target_px = axes.to_pixel(target.x, target.y)
    direction = unit_direction(source_px, target_px)
    if direction is None:
        logger.debug("No arrowhead for %s -> %s: endpoints coincide", edge.source, edge.target)
        return
    tip = np.asarray(target_px) - direction * _radius_px(axes, config.node_radius(target.shape))
    triangle = arrowhead_points(tip, direction, config.arrow_length_px, config.arrow_half_width_px)
    axes.add_svg_element(
        f'<polygon points="{format_points(triangle)}" fill="{edge.color.to_svg()}" stroke="none"/>'
    )


def _draw_node(node: Node, axes: Axes, config: RenderConfig) -> None:
    size = config.large_marker_size if node.shape in _LARGE_SHAPES else config.marker_size
    axes.scatter(
        [node.x],
        [node.y],
        color=node.color,
        marker=SHAPE_MARKERS.get(node.shape, Marker.ELLIPSE),
        marker_size=size,
        label=node.label,
    )


def _draw_border(graph: Graph, subgraph: Subgraph, axes: Axes, config: RenderConfig) -> bool:
    box = _subgraph_box(graph, subgraph, config.subgraph_padding)
    if box is None:
        return False
    corners = box_corners(box)
    closed = np.vstack((corners, corners[:1]))
    axes.plot(
        closed[:, 0],
        closed[:, 1],
        color=subgraph_border_color(subgraph.color),
        line_width=config.subgraph_border_width,
    )
    if subgraph.label:
        x_min, _, _, y_max = box
        px, py = axes.to_pixel(x_min, y_max)
        axes.add_svg_element(
            f'<text x="{format_float(px + 4)}" y="{format_float(py + config.subgraph_label_font_size + 2)}" '
            f'font-size="{format_float(config.subgraph_label_font_size)}" fill="black">'
            f"{escape_text(subgraph.label)}</text>"
        )
    return True


def render_to_axes(graph: Graph, axes: Axes, config: Optional[RenderConfig] = None) -> None:
    """Append the primitives for ``graph`` to ``axes``; the graph is only read."""

    cfg = config if config is not None else get_render_config()
    _fix_limits(graph, axes, cfg)

    backgrounds = sum(_draw_background(graph, subgraph, axes, cfg) for subgraph in graph.subgraphs)

    drawn_edges = 0
    for edge in graph.edges:
        source = graph.nodes.get(edge.source)
        target = graph.nodes.get(edge.target)
        if source is None or target is None:
            logger.debug("Skipping edge %s -> %s with a missing endpoint", edge.source, edge.target)
            continue
        _draw_edge(edge, source, target, axes, cfg)
        drawn_edges += 1

    for node in graph.nodes.values():
        _draw_node(node, axes, cfg)

    borders = sum(_draw_border(graph, subgraph, axes, cfg) for subgraph in graph.subgraphs)
    logger.info(
        "Rendered %d nodes, %d edges, %d subgraph fill(s), %d subgraph border(s)",
        len(graph.nodes),
        drawn_edges,
        backgrounds,
        borders,
    )
