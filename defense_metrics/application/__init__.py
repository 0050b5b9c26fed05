"""Application layer - Data Transfer Objects and Use Cases."""

# Data Transfer Objects
from .dto import MetricsSummaryRequest, TrendRequest

# Use cases
from .use_cases import GetMetricsSummaryUseCase, GetTrendsUseCase
