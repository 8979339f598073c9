from __future__ import annotations

from .core import DEFAULT_TICK_COUNT, DomainError
from .ticks import compute_nice_ticks


class LinearScale:
    """Maps quantitative values to a continuous pixel range."""

    def __init__(self, domain: tuple[float, float], range: tuple[float, float]) -> None:
        self.domain = domain
        self.range = range

    def map(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            raise DomainError(f"Cannot map onto an empty domain [{d0}, {d1}]")
        # Normalize t to [0, 1]
        t = (value - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def ticks(self, count: int = DEFAULT_TICK_COUNT) -> tuple[float, ...]:
        """Nice tick values covering the domain."""
        return compute_nice_ticks(min(self.domain), max(self.domain), count)
