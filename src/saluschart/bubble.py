from __future__ import annotations


def calculate_bubble_size(
    value: float, max_value: float, min_size: float, max_size: float
) -> float:
    """
    Linearly interpolates a bubble size from `value` in [0, max_value].

    Values above `max_value` are not clamped and yield sizes past `max_size`.
    """
    if max_value <= 0:
        return min_size
    return min_size + (max_size - min_size) * (value / max_value)
