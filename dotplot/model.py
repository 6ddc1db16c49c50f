"""Graph model shared by the parser, the layout engine and the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .colors import BLACK, Color

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .canvas.axes import Axes
    from .config import LayoutConfig, RenderConfig


class NodeShape(Enum):
    CIRCLE = "circle"
    RECTANGLE = "box"
    DIAMOND = "diamond"
    ELLIPSE = "ellipse"
    MDIAMOND = "Mdiamond"
    MSQUARE = "Msquare"


class EdgeStyle(Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class LayoutAlgorithm(Enum):
    HIERARCHICAL = "hierarchical"
    CIRCULAR = "circular"
    FORCE_DIRECTED = "force"
    GRID = "grid"


@dataclass
class Node:
    id: str
    label: Optional[str] = None
    shape: NodeShape = NodeShape.ELLIPSE
    color: Color = BLACK
    x: float = 0.0
    y: float = 0.0
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Edge:
    source: str
    target: str
    label: Optional[str] = None
    color: Color = BLACK
    style: EdgeStyle = EdgeStyle.SOLID
    directed: bool = True


@dataclass
class Subgraph:
    id: str
    label: Optional[str] = None
    style: Optional[str] = None
    color: Optional[str] = None
    fill_color: Optional[str] = None
    nodes: List[str] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)

    def add_member(self, node_id: str) -> None:
        if node_id not in self.nodes:
            self.nodes.append(node_id)

    @property
    def filled(self) -> bool:
        return (self.style or "").strip().lower() == "filled"


@dataclass
class Graph:
    """Nodes keyed by id (insertion ordered), ordered edges and subgraphs."""

    directed: bool = True
    name: Optional[str] = None
    nodes: Dict[str, Node] = field(default_factory=dict)
    edges: List[Edge] = field(default_factory=list)
    subgraphs: List[Subgraph] = field(default_factory=list)
    layout: LayoutAlgorithm = LayoutAlgorithm.HIERARCHICAL
    attributes: Dict[str, str] = field(default_factory=dict)

    def set_layout(self, layout: LayoutAlgorithm) -> None:
        self.layout = layout

    def add_node(self, node: Node) -> Node:
        """Insert ``node`` unless its id is already present; return the stored node."""

        existing = self.nodes.get(node.id)
        if existing is not None:
            return existing
        self.nodes[node.id] = node
        return node

    def apply_layout(self, config: Optional["LayoutConfig"] = None) -> None:
        from .layout import apply_layout

        apply_layout(self, config=config)

    def render_to_axes(self, axes: "Axes", config: Optional["RenderConfig"] = None) -> None:
        from .render import render_to_axes

        render_to_axes(self, axes, config=config)
