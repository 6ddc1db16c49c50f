import logging
from typing import List, Tuple

import numpy as np

from ..config import LayoutConfig
from ..logging_utils import apply_debug_logging
from ..model import Graph
from .utils import assign_positions, circle_points

logger = logging.getLogger(__name__)


def _edge_index_pairs(graph: Graph) -> Tuple[np.ndarray, np.ndarray]:
    index = {node_id: i for i, node_id in enumerate(graph.nodes)}
    pairs: List[Tuple[int, int]] = [
        (index[edge.source], index[edge.target])
        for edge in graph.edges
        if edge.source in index and edge.target in index
    ]
    if not pairs:
        return np.zeros(0, dtype=int), np.zeros(0, dtype=int)
    src, dst = zip(*pairs)
    return np.array(src, dtype=int), np.array(dst, dtype=int)


def relax_step(positions: np.ndarray, src: np.ndarray, dst: np.ndarray, strength: float) -> np.ndarray:
    """One attraction pass: every edge pulls its endpoints towards each other.

    All adjustments are computed from ``positions`` before any is applied.
    """

    adjustments = np.zeros_like(positions)
    if src.size:
        delta = positions[dst] - positions[src]
        moving = np.any(delta != 0.0, axis=1)
        np.add.at(adjustments, src[moving], delta[moving] * strength)
        np.add.at(adjustments, dst[moving], -delta[moving] * strength)
    return positions + adjustments


def force_directed_layout(graph: Graph, config: LayoutConfig) -> None:
    # Attraction only, no repulsion: connected nodes may end up overlapping.
    positions = circle_points(len(graph.nodes), config.force_initial_radius)
    src, dst = _edge_index_pairs(graph)
    lo, hi = config.force_bounds
    for _ in range(config.force_iterations):
        positions = np.clip(relax_step(positions, src, dst, config.force_pull_strength), lo, hi)
    assign_positions(graph, positions)


apply_debug_logging(globals(), logger=logger)
