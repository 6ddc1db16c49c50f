"""Layout façade dispatching to the positioning strategies."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ..config import LayoutConfig, get_layout_config
from ..model import Graph, LayoutAlgorithm
from .circular import circular_layout
from .force import force_directed_layout, relax_step
from .grid import grid_layout, grid_shape
from .hierarchical import compute_layers, hierarchical_layout
from .utils import circle_points, spread

logger = logging.getLogger(__name__)

LayoutFn = Callable[[Graph, LayoutConfig], None]

STRATEGIES: Dict[LayoutAlgorithm, LayoutFn] = {
    LayoutAlgorithm.HIERARCHICAL: hierarchical_layout,
    LayoutAlgorithm.CIRCULAR: circular_layout,
    LayoutAlgorithm.FORCE_DIRECTED: force_directed_layout,
    LayoutAlgorithm.GRID: grid_layout,
}


def apply_layout(
    graph: Graph,
    algorithm: Optional[LayoutAlgorithm] = None,
    *,
    config: Optional[LayoutConfig] = None,
) -> Graph:
    """Position every node of ``graph`` in place and return the graph.

    ``algorithm`` overrides ``graph.layout`` for this call only.
    """

    selected = algorithm or graph.layout
    cfg = config if config is not None else get_layout_config()
    logger.info("Applying %s layout to %d nodes", selected.value, len(graph.nodes))
    STRATEGIES[selected](graph, cfg)
    return graph


__all__ = [
    "STRATEGIES",
    "apply_layout",
    "circle_points",
    "circular_layout",
    "compute_layers",
    "force_directed_layout",
    "grid_layout",
    "grid_shape",
    "hierarchical_layout",
    "relax_step",
    "spread",
]
