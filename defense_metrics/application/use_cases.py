# defense_metrics/application/use_cases.py - Application use cases

import logging
from typing import Dict, List

from ..domain.entities import MetricsSummary, TrendPoint
from ..domain.exceptions import DataAccessError, UseCaseError
from ..domain.interfaces.rest_connection import DatabaseError
from ..domain.orchestration import MetricsOrchestrator
from .dto import MetricsSummaryRequest, TrendRequest

logger = logging.getLogger(__name__)

STORE_ERRORS = (DataAccessError, DatabaseError)


class GetMetricsSummaryUseCase:
    """Use case for computing the metrics summary of a game selection."""

    def __init__(self, orchestrator: MetricsOrchestrator):
        self._orchestrator = orchestrator

    def execute(self, request: MetricsSummaryRequest) -> MetricsSummary:
        """Execute the summary computation.

        Raises:
            UseCaseError: when the data store cannot be read
        """
        try:
            return self._orchestrator.compute_metrics_summary(request.game_ids)
        except STORE_ERRORS as e:
            logger.error(f"Failed to compute metrics summary: {e}")
            raise UseCaseError(
                f"Failed to compute metrics summary: {e}",
                operation="compute_metrics_summary",
                context={'game_ids': request.game_ids}
            ) from e


class GetTrendsUseCase:
    """Use case for building per-game trend series."""

    def __init__(self, orchestrator: MetricsOrchestrator):
        self._orchestrator = orchestrator

    def execute(self, request: TrendRequest) -> Dict[str, List[TrendPoint]]:
        try:
            return self._orchestrator.compute_trends(request.game_ids)
        except STORE_ERRORS as e:
            logger.error(f"Failed to compute trends: {e}")
            raise UseCaseError(
                f"Failed to compute trends: {e}",
                operation="compute_trends",
                context={'game_ids': request.game_ids}
            ) from e
