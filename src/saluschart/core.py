from __future__ import annotations
import datetime
import enum
import math
from dataclasses import dataclass, field
from typing import Sequence


PADDING_X = 60.0
PADDING_Y = 40.0
DEFAULT_TICK_COUNT = 5
PIE_PADDING = 32.0
PIE_START_ANGLE = -90.0
TICK_TOLERANCE = 1e-6
TICK_DECIMALS = 6
ZERO_SNAP_RATIO = 0.1


class DomainError(ValueError):
    """Raised when an input has no meaningful geometric projection."""


class ChartType(enum.Enum):
    DEFAULT = "default"
    LINE = "line"
    BAR = "bar"
    STACKED_BAR = "stacked_bar"
    SCATTER = "scatter"
    RANGE = "range"
    PIE = "pie"
    CALENDAR = "calendar"

    @property
    def zero_baseline(self) -> bool:
        """Bar-family charts always anchor the Y axis at zero."""
        return self in (ChartType.BAR, ChartType.STACKED_BAR)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def distance(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    @classmethod
    def polar(cls, radius: float, degrees: float) -> Point:
        """A point at `radius` from the origin, screen convention (y down)."""
        theta = math.radians(degrees)
        return cls(radius * math.cos(theta), radius * math.sin(theta))


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)


@dataclass(frozen=True)
class Bounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def bottomright(self) -> Point:
        return Point(self.x + self.width, self.y + self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, p: Point) -> bool:
        return (
            self.x <= p.x <= self.x + self.width
            and self.y <= p.y <= self.y + self.height
        )


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float
    label: str = ""


@dataclass(frozen=True)
class RangePoint:
    x: float
    y_min: float
    y_max: float
    label: str = ""


@dataclass(frozen=True)
class StackedPoint:
    x: float
    values: Sequence[float] = field(default_factory=tuple)
    label: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def total(self) -> float:
        return sum(self.values)


@dataclass(frozen=True)
class CalendarEntry:
    """A value shown on one calendar day. `color` overrides the default fill."""

    date: datetime.date
    value: float
    color: int | None = None
