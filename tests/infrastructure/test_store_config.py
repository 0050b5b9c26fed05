# tests/infrastructure/test_store_config.py

"""
Unit tests for store configuration and the factory functions.
"""

import json
import pytest
from defense_metrics.domain.exceptions import ConfigurationError
from defense_metrics.domain.orchestration import MetricsOrchestrator
from defense_metrics.infrastructure import StoreConfig, DataSource, create_store, create_metrics_orchestrator
from defense_metrics.infrastructure.data import InMemoryMetricsStore


class TestStoreConfig:
    """Test data source selection."""

    def test_defaults_to_supabase(self):
        config = StoreConfig.from_env({})

        assert config.data_source == DataSource.SUPABASE
        assert config.get_description() == "DataSource=supabase"

    def test_memory_from_env(self):
        config = StoreConfig.from_env({
            'DEFENSE_METRICS_DATA_SOURCE': ' Memory ',
            'DEFENSE_METRICS_EXPORT_PATH': '/tmp/upload.json',
        })

        assert config.data_source == DataSource.MEMORY
        assert config.export_path == '/tmp/upload.json'

    def test_memory_requires_export_path(self):
        with pytest.raises(ConfigurationError, match="export path is required"):
            StoreConfig(data_source=DataSource.MEMORY)

    def test_unknown_source(self):
        with pytest.raises(ConfigurationError, match="must be one of: supabase, memory"):
            StoreConfig.from_env({'DEFENSE_METRICS_DATA_SOURCE': 'csv'})


class TestFactories:
    """Test store and orchestrator creation."""

    def test_create_memory_store(self, tmp_path):
        export = tmp_path / "upload.json"
        export.write_text(json.dumps({'games': [{'id': 'g1', 'filename': 'a.csv'}], 'plays': [], 'drives': []}))

        store = create_store(StoreConfig(data_source=DataSource.MEMORY, export_path=str(export)))

        assert isinstance(store, InMemoryMetricsStore)
        assert len(store.get_games()) == 1

    def test_create_orchestrator_with_store(self):
        store = InMemoryMetricsStore()
        orchestrator = create_metrics_orchestrator(store=store)

        assert isinstance(orchestrator, MetricsOrchestrator)
        assert orchestrator.store is store
