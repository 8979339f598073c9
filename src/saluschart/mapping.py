from __future__ import annotations
from typing import Sequence

from .core import DataPoint, Point, Size
from .metrics import ChartMetrics


def map_value_to_y(value: float, metrics: ChartMetrics) -> float:
    """Pixel row of a data value inside the plot area. Raises on a zero Y span."""
    return metrics.y_scale.map(value)


def map_to_canvas_points(
    points: Sequence[DataPoint], size: Size, metrics: ChartMetrics
) -> tuple[Point, ...]:
    """
    Projects points onto the canvas, left to right by position in `points`.

    The point's own `x` is ignored; spacing is uniform across the plot width.
    A single point is centred horizontally.
    """
    n = len(points)
    if n == 0:
        return ()

    if n == 1:
        return (
            Point(
                metrics.padding_x + metrics.chart_width / 2,
                map_value_to_y(points[0].y, metrics),
            ),
        )

    spacing = metrics.chart_width / (n - 1)
    return tuple(
        Point(metrics.padding_x + i * spacing, map_value_to_y(p.y, metrics))
        for i, p in enumerate(points)
    )
