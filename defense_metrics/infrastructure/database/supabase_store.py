# defense_metrics/infrastructure/database/supabase_store.py - Store backed by Supabase tables

import logging
from typing import Dict, List, Optional, Sequence
import pandas as pd
import requests

from ...domain.entities import Game
from ...domain.interfaces.rest_connection import RestConnectionInterface
from ...domain.interfaces.store import MetricsStoreInterface
from ...domain.records import normalize_plays, normalize_drives
from ...utils.error_handling import handle_data_access_errors

logger = logging.getLogger(__name__)

STORE_REQUEST_ERRORS = (requests.RequestException, ValueError)


class SupabaseMetricsStore(MetricsStoreInterface):
    """Reads games, plays and drives through the Supabase REST API.

    Plays are requested in ``play_order`` so sequence-based metrics see them
    in the order they were snapped.
    """

    GAMES_TABLE = 'games'
    PLAYS_TABLE = 'plays'
    DRIVES_TABLE = 'drives'

    def __init__(
        self,
        connection: RestConnectionInterface,
        timeout: float = 30,
        page_size: int = 1000,
        play_order: str = 'game_id,id'
    ):
        self._connection = connection
        self._timeout = timeout
        self._page_size = page_size
        self._play_order = play_order

    @handle_data_access_errors("fetch games", catch=STORE_REQUEST_ERRORS)
    def get_games(self) -> List[Game]:
        rows = self._paginated_query(self.GAMES_TABLE, {'select': '*'})
        return [Game.from_record(row) for row in rows]

    @handle_data_access_errors("fetch plays", catch=STORE_REQUEST_ERRORS)
    def get_plays(self, game_ids: Optional[Sequence[str]] = None) -> pd.DataFrame:
        if game_ids is not None and len(game_ids) == 0:
            return normalize_plays([])

        params = {'select': '*', 'order': self._play_order}
        if game_ids is not None:
            params['game_id'] = self._in_filter(game_ids)

        return normalize_plays(self._paginated_query(self.PLAYS_TABLE, params))

    @handle_data_access_errors("fetch drives", catch=STORE_REQUEST_ERRORS)
    def get_drives(self) -> pd.DataFrame:
        rows = self._paginated_query(self.DRIVES_TABLE, {'select': '*'})
        return normalize_drives(rows)

    def get_data_source_name(self) -> str:
        return "Supabase REST API"

    @staticmethod
    def _in_filter(values: Sequence[str]) -> str:
        """PostgREST ``in`` filter with every value quoted."""
        quoted = ','.join('"{}"'.format(str(v).replace('"', '\\"')) for v in values)
        return f"in.({quoted})"

    def _paginated_query(self, table: str, base_params: Dict[str, str]) -> List[Dict]:
        """Execute a paginated query to retrieve all rows of a table."""
        self._connection.ensure_ready()

        url = self._connection.table_url(table)
        headers = self._connection.request_headers()

        all_results = []
        offset = 0

        while True:
            query_params = dict(base_params)
            query_params['limit'] = str(self._page_size)
            query_params['offset'] = str(offset)

            request_headers = dict(headers)
            request_headers['Range'] = f'{offset}-{offset + self._page_size - 1}'

            logger.debug(f"Fetching {table} rows {offset} to {offset + self._page_size - 1}")

            response = requests.get(url, headers=request_headers, params=query_params, timeout=self._timeout)
            response.raise_for_status()

            batch_results = response.json()
            if not isinstance(batch_results, list):
                raise ValueError(f"Unexpected response shape from {table}")

            all_results.extend(batch_results)

            # Fewer rows than requested means this was the last page
            if len(batch_results) < self._page_size:
                break

            offset += len(batch_results)

        logger.info(f"Retrieved {len(all_results)} rows from {table}")
        return all_results
