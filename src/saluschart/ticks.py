from __future__ import annotations
import logging
import math

from .core import DEFAULT_TICK_COUNT, TICK_DECIMALS, TICK_TOLERANCE, DomainError

logger = logging.getLogger(__name__)

NICE_FACTORS = (1.0, 2.0, 5.0)
FALLBACK_TICKS = (0.0, 1.0)


def nice_step(raw_step: float) -> float:
    """
    Rounds `raw_step` to the closest of 1, 2 or 5 times a power of ten.
    The power is taken from the raw step itself, so 9 rounds to 5, not 10.
    """
    power = 10.0 ** math.floor(math.log10(raw_step))
    return min((f * power for f in NICE_FACTORS), key=lambda c: abs(c - raw_step))


def compute_nice_ticks(
    min_value: float, max_value: float, tick_count: int = DEFAULT_TICK_COUNT
) -> tuple[float, ...]:
    """
    Computes visually clean axis ticks covering [min_value, max_value].

    The range is widened outwards to multiples of the chosen step, so the first
    tick is <= min_value and the last is >= max_value. The number of ticks is
    whatever fits, not necessarily `tick_count`. A degenerate range
    (min_value >= max_value) yields the fixed fallback (0, 1).
    """
    if tick_count < 1:
        raise DomainError(f"tick_count must be positive, got {tick_count}")

    if min_value >= max_value:
        logger.debug(
            "Degenerate tick range [%s, %s], using fallback ticks",
            min_value,
            max_value,
        )
        return FALLBACK_TICKS

    step = nice_step((max_value - min_value) / tick_count)
    nice_min = math.floor(min_value / step) * step
    nice_max = math.ceil(max_value / step) * step

    # Sub-milli steps keep enough digits to stay distinct after rounding
    decimals = max(TICK_DECIMALS, 3 - math.floor(math.log10(step)))
    limit = nice_max + step * TICK_TOLERANCE

    ticks: list[float] = []
    i = 0
    while (t := nice_min + i * step) <= limit:
        # Strip binary noise such as 0.30000000000000004
        ticks.append(round(t, decimals) + 0.0)
        i += 1

    return tuple(ticks)
