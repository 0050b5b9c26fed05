"""Domain layer - business entities and core logic."""

# Core entities
from .entities import (
    Game, MetricValue, CoreMetrics, NovelMetrics, MetricsSummary, TrendPoint,
    trends_to_dict
)

# Domain exceptions
from .exceptions import (
    DefenseMetricsException, ConfigurationError,
    DataAccessError,
    DataValidationError, UseCaseError
)

# Metrics
from .metrics import DefensiveMetrics, MetricDefinition, MetricType

# Validation
from .validation import MetricsValidator
