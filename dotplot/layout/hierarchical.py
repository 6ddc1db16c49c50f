"""Layered top-down placement.

Nodes are ranked by a Kahn-style topological sweep. Nodes the sweep never
reaches (they sit on a cycle) are slotted in right after their earliest
already-placed predecessor. Each subgraph owns a fixed column; nodes outside
any subgraph share the centre column.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

import numpy as np

from ..config import LayoutConfig
from ..logging_utils import apply_debug_logging
from ..model import Graph
from .utils import spread

logger = logging.getLogger(__name__)


def compute_layers(graph: Graph) -> List[List[str]]:
    adjacency: Dict[str, List[str]] = {node_id: [] for node_id in graph.nodes}
    predecessors: Dict[str, List[str]] = {node_id: [] for node_id in graph.nodes}
    in_degree: Dict[str, int] = {node_id: 0 for node_id in graph.nodes}
    for edge in graph.edges:
        if edge.source not in adjacency or edge.target not in adjacency:
            continue
        adjacency[edge.source].append(edge.target)
        predecessors[edge.target].append(edge.source)
        in_degree[edge.target] += 1

    layers: List[List[str]] = []
    placed: Dict[str, int] = {}
    frontier: Deque[str] = deque(node_id for node_id, degree in in_degree.items() if degree == 0)
    while frontier:
        layer: List[str] = []
        for _ in range(len(frontier)):
            node_id = frontier.popleft()
            layer.append(node_id)
            placed[node_id] = len(layers)
            for neighbor in adjacency[node_id]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    frontier.append(neighbor)
        layers.append(layer)

    unreached = [node_id for node_id in graph.nodes if node_id not in placed]
    if unreached:
        logger.info("Breaking cycles: %d node(s) not reached by the topological sweep", len(unreached))
    for node_id in unreached:
        placed_preds = [placed[pred] for pred in predecessors[node_id] if pred in placed]
        target = min(placed_preds) + 1 if placed_preds else len(layers)
        if target >= len(layers):
            layers.append([node_id])
            target = len(layers) - 1
        else:
            layers[target].append(node_id)
        placed[node_id] = target
    return layers


def _membership(graph: Graph) -> Dict[str, str]:
    """First declared subgraph listing a node wins."""

    owner: Dict[str, str] = {}
    for subgraph in graph.subgraphs:
        for member in subgraph.nodes:
            owner.setdefault(member, subgraph.id)
    return owner


def _column_positions(graph: Graph, owner: Dict[str, str], config: LayoutConfig) -> Dict[Optional[str], float]:
    used = set(owner.values())
    column_ids: List[str] = []
    for subgraph in graph.subgraphs:
        if subgraph.id in used and subgraph.id not in column_ids:
            column_ids.append(subgraph.id)
    positions = spread(len(column_ids), config.column_span)
    columns: Dict[Optional[str], float] = {sid: float(x) for sid, x in zip(column_ids, positions)}
    lo, hi = config.column_span
    columns[None] = (lo + hi) / 2.0
    return columns


def _fan_out(base_x: float, count: int, config: LayoutConfig) -> np.ndarray:
    if count == 1:
        return np.array([base_x])
    offsets = (np.arange(count) / (count - 1) - 0.5) * config.column_spread
    lo, hi = config.column_clamp
    return np.clip(base_x + offsets, lo, hi)


def _layer_heights(count: int, config: LayoutConfig) -> np.ndarray:
    # Layer 0 at the top: y decreases as the layer index grows.
    return spread(count, config.layer_span)[::-1]


def hierarchical_layout(graph: Graph, config: LayoutConfig) -> None:
    layers = compute_layers(graph)
    if not layers:
        return
    owner = _membership(graph)
    columns = _column_positions(graph, owner, config)
    heights = _layer_heights(len(layers), config)
    logger.info("Hierarchical layout: %d layer(s), %d subgraph column(s)", len(layers), len(columns) - 1)

    for layer_index, layer in enumerate(layers):
        groups: Dict[Optional[str], List[str]] = {}
        for node_id in layer:
            groups.setdefault(owner.get(node_id), []).append(node_id)
        for column, members in groups.items():
            xs = _fan_out(columns.get(column, columns[None]), len(members), config)
            for node_id, x in zip(members, xs):
                node = graph.nodes[node_id]
                node.x = float(x)
                node.y = float(heights[layer_index])


apply_debug_logging(globals(), logger=logger)
