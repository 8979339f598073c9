from .core import (
    Point,
    Size,
    Bounds,
    DataPoint,
    RangePoint,
    StackedPoint,
    CalendarEntry,
    ChartType,
    DomainError,
)
from .ticks import compute_nice_ticks
from .scale import LinearScale
from .metrics import (
    ChartMetrics,
    compute_metrics,
    compute_range_metrics,
    compute_stacked_metrics,
    stacked_totals,
)
from .mapping import map_to_canvas_points, map_value_to_y
from .pie import (
    PieMetrics,
    PieSlice,
    compute_pie_metrics,
    compute_pie_angles,
    calculate_label_position,
)
from .calendar_grid import CalendarGrid, compute_calendar_metrics, calendar_cell
from .bubble import calculate_bubble_size
from .logging_config import setup_logging

__version__ = "0.1.0"
