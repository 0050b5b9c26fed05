# defense_metrics/infrastructure/factories.py - Factory functions for dependency creation

import logging
from typing import Optional

from .store_config import StoreConfig, DataSource
from .data.in_memory_store import InMemoryMetricsStore
from .database.supabase_client import SupabaseClient
from .database.supabase_store import SupabaseMetricsStore
from ..config.settings import MetricsSettings
from ..domain.interfaces.rest_connection import DatabaseError
from ..domain.interfaces.store import MetricsStoreInterface
from ..domain.metrics_engine import MetricsEngine
from ..domain.orchestration import MetricsOrchestrator

logger = logging.getLogger(__name__)


def create_store(config: Optional[StoreConfig] = None) -> MetricsStoreInterface:
    """Create the data store selected by the configuration."""
    config = config or StoreConfig.from_env()

    if config.data_source == DataSource.MEMORY:
        return InMemoryMetricsStore.from_json_file(config.export_path)

    client = SupabaseClient()
    if not client.connect():
        raise DatabaseError("Failed to connect to Supabase")
    return SupabaseMetricsStore(client)


def create_metrics_orchestrator(
    store: Optional[MetricsStoreInterface] = None,
    settings: Optional[MetricsSettings] = None
) -> MetricsOrchestrator:
    """Create metrics orchestrator with all dependencies."""
    store = store or create_store()
    engine = MetricsEngine(settings)

    logger.info(f"Created metrics orchestrator using {store.get_data_source_name()}")

    return MetricsOrchestrator(store=store, engine=engine)
