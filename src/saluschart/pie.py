from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Sequence

from .core import PIE_PADDING, PIE_START_ANGLE, DataPoint, Point, Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PieMetrics:
    center: Point
    radius: float


@dataclass(frozen=True)
class PieSlice:
    """One slice of a pie, angles in degrees, clockwise on screen."""

    start_angle: float
    sweep_angle: float
    value_ratio: float

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.sweep_angle / 2


def compute_pie_metrics(size: Size, padding: float = PIE_PADDING) -> PieMetrics:
    """Largest circle centred on the canvas, inset by `padding`."""
    return PieMetrics(size.center, size.min_dimension / 2 - padding)


def compute_pie_angles(points: Sequence[DataPoint]) -> tuple[PieSlice, ...]:
    """
    Splits the full circle among `points` in input order, starting at 12 o'clock.

    Returns no slices when the values do not sum to a positive total.
    """
    total = sum(p.y for p in points)
    if total <= 0:
        logger.debug("Pie total is %s, nothing to draw", total)
        return ()

    slices: list[PieSlice] = []
    start = PIE_START_ANGLE

    for p in points:
        ratio = p.y / total
        sweep = ratio * 360
        slices.append(PieSlice(start, sweep, ratio))
        start += sweep

    return tuple(slices)


def calculate_label_position(
    center: Point, radius: float, radius_factor: float, angle: float
) -> Point:
    """
    Position of a slice label at `angle` degrees.

    A `radius_factor` below 1 puts the label inside the pie, above 1 outside.
    """
    return center + Point.polar(radius * radius_factor, angle)
