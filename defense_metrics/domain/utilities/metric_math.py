# defense_metrics/domain/utilities/metric_math.py - Shared arithmetic for metric calculators

import math
from typing import Iterable, Optional

from ..entities import MetricValue
from ...config.metric_constants import METRIC_DECIMAL_PLACES


def calculate_percentage(numerator: float, denominator: float) -> float:
    """Percentage of numerator over denominator, 0 when the denominator is empty."""
    return (numerator / denominator) * 100 if denominator > 0 else 0


def safe_ratio(numerator: float, denominator: float, default: float = 0) -> float:
    """Plain ratio with a default for empty denominators."""
    return numerator / denominator if denominator > 0 else default


def sequential_mean(values: Iterable[float]) -> float:
    """Mean of values accumulated in input order, 0 when there are none."""
    total = 0.0
    count = 0
    for value in values:
        total += value
        count += 1
    return total / count if count > 0 else 0


def round_half_up(value: float, places: int) -> float:
    """Round to ``places`` decimals with halves going up (0.125 -> 0.13)."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def format_half_up(value: float, places: int) -> str:
    """Fixed-point text with half-up rounding, unlike format(value, '.1f')."""
    return f"{round_half_up(value, places):.{places}f}"


def round_metric(value: Optional[float]) -> Optional[float]:
    """Round half up to the reporting precision; NaN and None become None.

    Half-up rounding keeps 0.125 -> 0.13, unlike Python's round().
    """
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return None
    if math.isinf(value):
        return value
    return round_half_up(value, METRIC_DECIMAL_PLACES)


def create_metric_value(value: Optional[float], explanation: str, note: Optional[str] = None) -> MetricValue:
    """Wrap a raw computed value with its explanation."""
    return MetricValue(value=round_metric(value), explanation=explanation, note=note)
