"""Scaling of sampled data into a pixel plot area, and SVG rendering of it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence
from xml.sax.saxutils import escape

MARGIN = 40
FLAT_RANGE = 1e-5
DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
X_LABEL = "시간 (s)"
Y_LABEL = "전류 (A)"


@dataclass(frozen=True)
class Segment:
    """A line segment in pixel coordinates, origin at the top left."""

    x1: int
    y1: int
    x2: int
    y2: int


def value_range(values: Iterable[float]) -> tuple[float, float]:
    """Return the plotted value range, widened by 0.5 each way if nearly flat."""
    values = list(values)
    if not values:
        raise ValueError("cannot take the range of no values")
    low, high = min(values), max(values)
    if high - low < FLAT_RANGE:
        low -= 0.5
        high += 0.5
    return low, high


def plot_segments(
    time: Sequence[float],
    values: Sequence[float],
    width: int,
    height: int,
    margin: int = MARGIN,
) -> list[Segment]:
    """Map consecutive samples to line segments inside a ``width`` x ``height`` area."""
    time = list(time)
    values = list(values)
    if len(time) != len(values):
        raise ValueError("time and values must have the same length")
    if len(time) < 2:
        return []
    x_min, x_max = time[0], time[-1]
    if x_max == x_min:
        raise ValueError("time axis has zero span")
    y_min, y_max = value_range(values)
    graph_width = width - 2 * margin
    graph_height = height - 2 * margin
    bottom = height - margin

    points = [
        (
            margin + int((t - x_min) / (x_max - x_min) * graph_width),
            bottom - int((v - y_min) / (y_max - y_min) * graph_height),
        )
        for t, v in zip(time, values)
    ]
    return [Segment(*a, *b) for a, b in zip(points, points[1:])]


def _line(x1: int, y1: int, x2: int, y2: int) -> str:
    return f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" stroke="black"/>'


def _text(x: int, y: int, content: str) -> str:
    return (
        f'<text x="{x}" y="{y}" dominant-baseline="hanging" '
        f'font-family="sans-serif" font-size="12">{escape(content)}</text>'
    )


def render_svg(
    time: Sequence[float],
    values: Sequence[float],
    title: str,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    margin: int = MARGIN,
) -> str:
    """Render axes, the data curve, the title and axis labels as an SVG document."""
    bottom = height - margin
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">',
        f'<rect width="{width}" height="{height}" fill="white"/>',
        _line(margin, bottom, width - margin, bottom),
        _line(margin, bottom, margin, margin),
    ]
    if time and values:
        parts.extend(
            _line(s.x1, s.y1, s.x2, s.y2)
            for s in plot_segments(time, values, width, height, margin)
        )
        parts.append(_text(margin, margin // 2, title))
        parts.append(_text(width // 2, bottom + 5, X_LABEL))
        parts.append(_text(5, margin // 2, Y_LABEL))
    parts.append("</svg>")
    return "\n".join(parts)