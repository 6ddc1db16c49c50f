from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from ..logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Box = Tuple[float, float, float, float]


def unit_direction(start: Point, end: Point) -> Optional[np.ndarray]:
    delta = np.asarray(end, dtype=float) - np.asarray(start, dtype=float)
    length = float(np.hypot(delta[0], delta[1]))
    if length == 0.0:
        return None
    return delta / length


def clip_to_boundaries(start: Point, end: Point, start_radius: float, end_radius: float) -> Tuple[np.ndarray, np.ndarray]:
    """Pull both endpoints inward along the centre line by their node radii."""

    p0 = np.asarray(start, dtype=float)
    p1 = np.asarray(end, dtype=float)
    direction = unit_direction(start, end)
    if direction is None:
        return p0, p1
    return p0 + direction * start_radius, p1 - direction * end_radius


def curve_points(
    start: Iterable[float],
    end: Iterable[float],
    *,
    strength: float = 0.2,
    segments: int = 10,
    threshold: float = 0.1,
) -> np.ndarray:
    """Sample a quadratic Bézier bowed to the left of ``start -> end``.

    Short segments (below ``threshold``) come back as a straight two-point line.
    Returns an ``(n, 2)`` array.
    """

    p0 = np.asarray(start, dtype=float)
    p2 = np.asarray(end, dtype=float)
    delta = p2 - p0
    distance = float(np.hypot(delta[0], delta[1]))
    if distance < threshold:
        return np.vstack((p0, p2))
    normal = np.array([-delta[1], delta[0]]) / distance
    control = (p0 + p2) / 2.0 + normal * strength * distance
    t = np.linspace(0.0, 1.0, segments + 1)[:, None]
    return (1 - t) ** 2 * p0 + 2 * (1 - t) * t * control + t ** 2 * p2


def arrowhead_points(tip: Point, direction: np.ndarray, length: float, half_width: float) -> np.ndarray:
    """Triangle with its tip at ``tip`` pointing along the unit ``direction``."""

    tip_arr = np.asarray(tip, dtype=float)
    base = tip_arr - direction * length
    perp = np.array([-direction[1], direction[0]])
    return np.vstack((tip_arr, base + perp * half_width, base - perp * half_width))


def bounding_box(points: Iterable[Point], pad: float = 0.0) -> Optional[Box]:
    """``(x_min, y_min, x_max, y_max)`` grown by ``pad`` on every side."""

    arr = np.asarray(list(points), dtype=float)
    if arr.size == 0:
        return None
    x_min, y_min = arr.min(axis=0)
    x_max, y_max = arr.max(axis=0)
    return (float(x_min) - pad, float(y_min) - pad, float(x_max) + pad, float(y_max) + pad)


def box_corners(box: Box) -> np.ndarray:
    x_min, y_min, x_max, y_max = box
    return np.array([(x_min, y_min), (x_max, y_min), (x_max, y_max), (x_min, y_max)], dtype=float)


apply_debug_logging(globals(), logger=logger)
