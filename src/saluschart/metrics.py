from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Sequence

from .core import (
    DEFAULT_TICK_COUNT,
    PADDING_X,
    PADDING_Y,
    ZERO_SNAP_RATIO,
    Bounds,
    ChartType,
    RangePoint,
    Size,
    StackedPoint,
)
from .scale import LinearScale
from .ticks import compute_nice_ticks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartMetrics:
    """
    Layout of a cartesian chart on a canvas.

    The plot area starts `padding_x` from the left edge and leaves
    `padding_y` at the bottom for axis labels. `min_y` and `max_y` are the
    first and last of `y_ticks`, so gridlines land exactly on the axis ends.
    """

    padding_x: float
    padding_y: float
    chart_width: float
    chart_height: float
    min_y: float
    max_y: float
    y_ticks: tuple[float, ...]

    @property
    def y_span(self) -> float:
        return self.max_y - self.min_y

    @property
    def plot_bounds(self) -> Bounds:
        return Bounds(self.padding_x, 0, self.chart_width, self.chart_height)

    @property
    def y_scale(self) -> LinearScale:
        # Screen Y grows downward, data Y grows upward
        return LinearScale((self.min_y, self.max_y), (self.chart_height, 0))


def _build_metrics(
    size: Size,
    min_y: float,
    max_y: float,
    tick_count: int,
    padding_x: float,
    padding_y: float,
) -> ChartMetrics:
    ticks = compute_nice_ticks(min_y, max_y, tick_count)

    return ChartMetrics(
        padding_x=padding_x,
        padding_y=padding_y,
        chart_width=size.width - padding_x,
        chart_height=size.height - padding_y,
        min_y=min(ticks),
        max_y=max(ticks),
        y_ticks=ticks,
    )


def baseline_for(data_min: float, data_max: float, chart_type: ChartType) -> float:
    """
    Lower Y bound before tick rounding.

    Bar charts are pinned to zero. Otherwise a non-negative minimum below a
    tenth of the maximum snaps to zero; anything else is kept as is.
    """
    if chart_type.zero_baseline:
        return 0.0
    if 0 <= data_min < data_max * ZERO_SNAP_RATIO:
        return 0.0
    return data_min


def compute_metrics(
    size: Size,
    values: Sequence[float],
    tick_count: int = DEFAULT_TICK_COUNT,
    chart_type: ChartType = ChartType.DEFAULT,
    *,
    padding_x: float = PADDING_X,
    padding_y: float = PADDING_Y,
) -> ChartMetrics:
    """Derives paddings, plot size and Y axis ticks for line, bar and scatter charts."""
    if values:
        data_min, data_max = min(values), max(values)
    else:
        logger.debug("No values given, using the unit range")
        data_min, data_max = 0.0, 1.0

    min_y = baseline_for(data_min, data_max, chart_type)
    return _build_metrics(size, min_y, data_max, tick_count, padding_x, padding_y)


def compute_range_metrics(
    size: Size,
    points: Sequence[RangePoint],
    tick_count: int = DEFAULT_TICK_COUNT,
    *,
    padding_x: float = PADDING_X,
    padding_y: float = PADDING_Y,
) -> ChartMetrics:
    """Like `compute_metrics`, over every `y_min` and `y_max`, never pinned to zero."""
    bounds = [v for p in points for v in (p.y_min, p.y_max)]
    if bounds:
        data_min, data_max = min(bounds), max(bounds)
    else:
        logger.debug("No range points given, using the unit range")
        data_min, data_max = 0.0, 1.0

    return _build_metrics(size, data_min, data_max, tick_count, padding_x, padding_y)


def stacked_totals(points: Sequence[StackedPoint]) -> list[float]:
    return [p.total for p in points]


def compute_stacked_metrics(
    size: Size,
    points: Sequence[StackedPoint],
    tick_count: int = DEFAULT_TICK_COUNT,
) -> ChartMetrics:
    """Metrics for a stacked bar chart, scaled to the tallest stack."""
    return compute_metrics(
        size, stacked_totals(points), tick_count, ChartType.STACKED_BAR
    )
