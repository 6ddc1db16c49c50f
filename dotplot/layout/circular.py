import logging

from ..config import LayoutConfig
from ..logging_utils import apply_debug_logging
from ..model import Graph
from .utils import assign_positions, circle_points

logger = logging.getLogger(__name__)


def circular_layout(graph: Graph, config: LayoutConfig) -> None:
    """Place the nodes evenly on a circle around the centre of the unit square."""

    assign_positions(graph, circle_points(len(graph.nodes), config.circle_radius))


apply_debug_logging(globals(), logger=logger)
