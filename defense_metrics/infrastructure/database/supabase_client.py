# defense_metrics/infrastructure/database/supabase_client.py

import logging
import os
from typing import Dict

import requests

from ...domain.exceptions import ConfigurationError
from ...domain.interfaces.rest_connection import RestConnectionInterface, DatabaseError

logger = logging.getLogger(__name__)


class SupabaseClient(RestConnectionInterface):
    """PostgREST connection to the Supabase project holding uploaded games, plays and drives.

    Reads are refused until ``connect()`` has seen the REST root answer.
    """

    REST_PATH = '/rest/v1'

    def __init__(self, url: str = None, key: str = None, timeout: float = 5):
        url = url or os.getenv('SUPABASE_URL')
        key = key or os.getenv('SUPABASE_KEY')

        if not url:
            raise ConfigurationError("SUPABASE_URL environment variable is required", source='SUPABASE_URL')
        if not key:
            raise ConfigurationError("SUPABASE_KEY environment variable is required", source='SUPABASE_KEY')

        if not url.startswith(('http://', 'https://')):
            raise ConfigurationError("SUPABASE_URL must be a valid HTTP/HTTPS URL", source='SUPABASE_URL')

        self.url = url.rstrip('/')
        self._key = key
        self._timeout = timeout
        self._ready = False

        # Log safely without exposing credentials
        masked_url = f"{self.url.split('/')[0]}//{self.url.split('/')[2]}/*****"
        logger.info(f"Initialized Supabase client for URL: {masked_url}")

    def table_url(self, table: str) -> str:
        return f"{self.url}{self.REST_PATH}/{table}"

    def request_headers(self) -> Dict[str, str]:
        return {
            'apikey': self._key,
            'Authorization': f'Bearer {self._key}',
            'Accept': 'application/json'
        }

    def connect(self) -> bool:
        """Check the REST root; reads are allowed once it answers without a server error."""
        try:
            response = requests.get(f"{self.url}{self.REST_PATH}/",
                                    headers=self.request_headers(),
                                    timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning(f"Supabase connectivity check failed: {e}")
            self._ready = False
            return False

        self._ready = response.status_code < 500
        if self._ready:
            logger.info("Successfully connected to Supabase")
        else:
            logger.error(f"Supabase answered the connectivity check with HTTP {response.status_code}")
        return self._ready

    def disconnect(self) -> None:
        self._ready = False
        logger.info("Disconnected from Supabase")

    def is_ready(self) -> bool:
        return self._ready

    def ensure_ready(self) -> None:
        if not self._ready:
            raise DatabaseError("Supabase connection not available; call connect() first")
