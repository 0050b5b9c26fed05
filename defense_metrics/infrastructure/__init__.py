"""Infrastructure layer - external adapters and implementations."""

from .store_config import StoreConfig, DataSource
from .factories import create_store, create_metrics_orchestrator
