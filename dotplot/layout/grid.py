import logging
import math
from typing import Tuple

import numpy as np

from ..config import LayoutConfig
from ..logging_utils import apply_debug_logging
from ..model import Graph
from .utils import assign_positions, spread

logger = logging.getLogger(__name__)


def grid_shape(count: int) -> Tuple[int, int]:
    if count <= 0:
        return (0, 0)
    cols = math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)
    return (cols, rows)


def grid_layout(graph: Graph, config: LayoutConfig) -> None:
    count = len(graph.nodes)
    cols, rows = grid_shape(count)
    if count == 0:
        return
    index = np.arange(count)
    xs = spread(cols, config.grid_span)[index % cols]
    ys = spread(rows, config.grid_span)[index // cols]
    assign_positions(graph, np.column_stack((xs, ys)))


apply_debug_logging(globals(), logger=logger)
