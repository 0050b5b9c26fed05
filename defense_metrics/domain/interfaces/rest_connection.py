# defense_metrics/domain/interfaces/rest_connection.py - Connection contract for REST-backed stores

from abc import ABC, abstractmethod
from typing import Dict


class DatabaseError(Exception):
    """Raised when a REST-backed store cannot be read."""
    pass


class RestConnectionInterface(ABC):
    """What a table-per-endpoint store needs from its connection."""

    @abstractmethod
    def table_url(self, table: str) -> str:
        """Endpoint serving the rows of ``table``."""
        pass

    @abstractmethod
    def request_headers(self) -> Dict[str, str]:
        """Authentication and content headers sent with every read."""
        pass

    @abstractmethod
    def ensure_ready(self) -> None:
        """Raise DatabaseError unless reads can be issued."""
        pass
