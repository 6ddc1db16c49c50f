import html
import math
from typing import Iterable, Tuple


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for SVG output")
    formatted = f"{value:.3f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def format_points(points: Iterable[Tuple[float, float]]) -> str:
    return " ".join(f"{format_float(x)},{format_float(y)}" for x, y in points)


def escape_text(text: str) -> str:
    return html.escape(text, quote=True)
