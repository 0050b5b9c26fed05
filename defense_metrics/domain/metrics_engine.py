# defense_metrics/domain/metrics_engine.py - Assembles the full metrics summary

import logging
from typing import Dict, Optional
import pandas as pd

from .entities import MetricsSummary, empty_drive_distribution
from .core_metrics_calculator import CoreMetricsCalculator
from .novel_metrics_calculator import NovelMetricsCalculator
from .records import RecordSource, normalize_plays, normalize_drives
from ..config.metric_constants import DRIVE_RESULT_OTHER
from ..config.settings import MetricsSettings

logger = logging.getLogger(__name__)


class MetricsEngine:
    """Pure computation core: plays and drives in, MetricsSummary out.

    Holds no state between calls. Results are never memoised; every call
    recomputes from the records it is given.
    """

    def __init__(self, settings: Optional[MetricsSettings] = None):
        settings = settings or MetricsSettings.default()
        self._core_calculator = CoreMetricsCalculator(settings)
        self._novel_calculator = NovelMetricsCalculator(settings)

    def compute_summary(self, plays: RecordSource, drives: RecordSource) -> MetricsSummary:
        """Compute core metrics, novel metrics and the drive-end distribution.

        Plays and drives may be raw rows or DataFrames; they are normalised
        into copies and never modified. With no plays the zero summary is
        returned, regardless of drives.
        """
        plays = normalize_plays(plays)
        drives = normalize_drives(drives)

        if len(plays) == 0:
            return MetricsSummary.empty()

        return MetricsSummary(
            core=self._core_calculator.calculate(plays, drives),
            novel=self._novel_calculator.calculate(plays, drives),
            drive_end_distribution=self.compute_drive_end_distribution(drives)
        )

    @staticmethod
    def compute_drive_end_distribution(drives: pd.DataFrame) -> Dict[str, int]:
        """Count drives per result category; unknown results count as Other."""
        distribution = empty_drive_distribution()
        for result in drives['result']:
            key = result if result in distribution else DRIVE_RESULT_OTHER
            distribution[key] += 1
        return distribution
