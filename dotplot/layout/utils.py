from __future__ import annotations

from typing import Tuple

import numpy as np

from ..model import Graph


def spread(count: int, span: Tuple[float, float]) -> np.ndarray:
    """``count`` evenly spaced values across ``span``; a single value sits at its midpoint."""

    lo, hi = span
    if count <= 0:
        return np.zeros(0)
    if count == 1:
        return np.array([(lo + hi) / 2.0])
    return np.linspace(lo, hi, count)


def circle_points(count: int, radius: float, center: Tuple[float, float] = (0.5, 0.5)) -> np.ndarray:
    if count <= 0:
        return np.zeros((0, 2))
    if count == 1:
        return np.array([center], dtype=float)
    angles = 2.0 * np.pi * np.arange(count) / count
    return np.column_stack((center[0] + radius * np.cos(angles), center[1] + radius * np.sin(angles)))


def assign_positions(graph: Graph, positions: np.ndarray) -> None:
    for node, (x, y) in zip(graph.nodes.values(), positions):
        node.x = float(x)
        node.y = float(y)
