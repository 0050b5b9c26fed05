# defense_metrics/infrastructure/data/in_memory_store.py - Store backed by in-process records

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union
import pandas as pd

from ...domain.entities import Game
from ...domain.interfaces.store import MetricsStoreInterface
from ...domain.records import normalize_plays, normalize_drives, filter_by_games
from ...utils.error_handling import handle_data_access_errors

logger = logging.getLogger(__name__)


class InMemoryMetricsStore(MetricsStoreInterface):
    """Store over records held in memory, e.g. a JSON export of an upload.

    Records are normalised on construction and copies are handed out on
    every read, so callers cannot alter the stored data.
    """

    def __init__(
        self,
        games: Iterable[Union[Game, Mapping[str, Any]]] = (),
        plays: Optional[Iterable[Mapping[str, Any]]] = None,
        drives: Optional[Iterable[Mapping[str, Any]]] = None
    ):
        self._games = [g if isinstance(g, Game) else Game.from_record(g) for g in games]
        self._plays = normalize_plays(plays)
        self._drives = normalize_drives(drives)
        logger.debug(f"In-memory store holds {len(self._games)} games, "
                     f"{len(self._plays)} plays, {len(self._drives)} drives")

    @classmethod
    @handle_data_access_errors("load metrics export", catch=(OSError, ValueError, TypeError))
    def from_json_file(cls, path: Union[str, Path]) -> 'InMemoryMetricsStore':
        """Load an export of the form {"games": [...], "plays": [...], "drives": [...]}."""
        with open(path, 'r') as f:
            payload = json.load(f)

        if not isinstance(payload, dict):
            raise ValueError(f"Export {path} must contain a JSON object")

        logger.info(f"Loaded metrics export from {path}")
        return cls(
            games=payload.get('games', []),
            plays=payload.get('plays', []),
            drives=payload.get('drives', [])
        )

    def get_games(self) -> List[Game]:
        return list(self._games)

    def get_plays(self, game_ids: Optional[Sequence[str]] = None) -> pd.DataFrame:
        return filter_by_games(self._plays, game_ids).copy()

    def get_drives(self) -> pd.DataFrame:
        return self._drives.copy()

    def get_data_source_name(self) -> str:
        return "In-memory records"
