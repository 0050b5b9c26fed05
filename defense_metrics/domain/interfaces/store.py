# defense_metrics/domain/interfaces/store.py - Data store interface consumed by the metrics engine

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
import pandas as pd

from ..entities import Game


class MetricsStoreInterface(ABC):
    """Read-only access to uploaded games, plays and drives.

    Plays must be returned in play order; every sequence-based metric
    (streaks, sliding windows, look-aheads) depends on it.
    """

    @abstractmethod
    def get_games(self) -> List[Game]:
        pass

    @abstractmethod
    def get_plays(self, game_ids: Optional[Sequence[str]] = None) -> pd.DataFrame:
        """Plays, optionally restricted to the given games.

        Rows may use camelCase or snake_case keys; the engine normalises them.
        """
        pass

    @abstractmethod
    def get_drives(self) -> pd.DataFrame:
        """All drives. The store has no drive filter; callers filter by game."""
        pass

    @abstractmethod
    def get_data_source_name(self) -> str:
        """Human-readable name of the data source for logging/debugging."""
        pass
