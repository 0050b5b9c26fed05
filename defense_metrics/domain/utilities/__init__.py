from .play_filter import PlayFilter
from .metric_math import (
    calculate_percentage, safe_ratio, sequential_mean, round_half_up, format_half_up,
    round_metric, create_metric_value
)
