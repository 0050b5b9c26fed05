# Domain interfaces - Essential abstractions only

from .rest_connection import (
    RestConnectionInterface,
    DatabaseError
)
from .store import MetricsStoreInterface

__all__ = [
    'RestConnectionInterface',
    'DatabaseError',
    'MetricsStoreInterface'
]
