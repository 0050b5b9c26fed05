# defense_metrics/domain/orchestration/metrics_orchestrator.py - Store access and trend assembly

import logging
from typing import Dict, List, Optional, Sequence

from ..entities import MetricsSummary, TrendPoint
from ..interfaces.store import MetricsStoreInterface
from ..metrics import DefensiveMetrics
from ..metrics_engine import MetricsEngine
from ..records import normalize_plays, normalize_drives, filter_by_games
from ...config.metric_constants import MIN_TREND_GAMES

logger = logging.getLogger(__name__)


class MetricsOrchestrator:
    """Orchestrates metric computation against the data store.

    Every call reads fresh records from the store; nothing is cached between
    calls. Store failures propagate to the caller unchanged.
    """

    def __init__(self, store: MetricsStoreInterface, engine: Optional[MetricsEngine] = None):
        self._store = store
        self._engine = engine or MetricsEngine()

    @property
    def store(self) -> MetricsStoreInterface:
        return self._store

    def compute_metrics_summary(self, game_ids: Optional[Sequence[str]] = None) -> MetricsSummary:
        """Compute the summary for the selected games, or every game when None."""
        plays = normalize_plays(self._store.get_plays(game_ids))
        drives = filter_by_games(normalize_drives(self._store.get_drives()), game_ids)

        selection = ', '.join(game_ids) if game_ids is not None else 'ALL'
        logger.info(f"Computing metrics for {len(plays)} plays and {len(drives)} drives. "
                    f"Game IDs: {selection}")

        return self._engine.compute_summary(plays, drives)

    def compute_trends(self, game_ids: Sequence[str]) -> Dict[str, List[TrendPoint]]:
        """Per-game series of the trend metrics, in the requested game order.

        Requires at least two requested games to exist in the store;
        otherwise returns an empty mapping. Records are fetched once and
        partitioned by game, each game's summary being computed on its own
        partition only.
        """
        games_by_id = {game.game_id: game for game in self._store.get_games()}
        # Repeated ids select a game once, at its first position
        requested_ids = list(dict.fromkeys(game_ids))
        selected_games = [games_by_id[game_id] for game_id in requested_ids if game_id in games_by_id]

        if len(selected_games) < MIN_TREND_GAMES:
            logger.info(f"Trends need at least {MIN_TREND_GAMES} known games, got {len(selected_games)}")
            return {}

        selected_ids = [game.game_id for game in selected_games]
        plays = normalize_plays(self._store.get_plays(selected_ids))
        drives = normalize_drives(self._store.get_drives())

        game_summaries = []
        for game in selected_games:
            summary = self._engine.compute_summary(
                filter_by_games(plays, [game.game_id]),
                filter_by_games(drives, [game.game_id])
            )
            game_summaries.append((game, summary))

        trends: Dict[str, List[TrendPoint]] = {}
        for metric in DefensiveMetrics.get_trend_metrics():
            trends[metric.key] = [
                TrendPoint(name=game.label, value=summary.core.get(metric.key).value or 0)
                for game, summary in game_summaries
            ]

        logger.info(f"Computed trends for {len(selected_games)} games")
        return trends
