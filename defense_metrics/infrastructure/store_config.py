# defense_metrics/infrastructure/store_config.py

from dataclasses import dataclass
from typing import Mapping, Optional
from enum import Enum
import logging
import os

from ..domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DATA_SOURCE_ENV = 'DEFENSE_METRICS_DATA_SOURCE'
EXPORT_PATH_ENV = 'DEFENSE_METRICS_EXPORT_PATH'


class DataSource(Enum):
    """Data source selection."""
    SUPABASE = "supabase"   # Uploaded tables in Supabase
    MEMORY = "memory"       # JSON export loaded into memory


@dataclass
class StoreConfig:
    """Explicit store configuration replacing hidden factory patterns."""

    data_source: DataSource = DataSource.SUPABASE
    export_path: Optional[str] = None

    def __post_init__(self):
        if self.data_source == DataSource.MEMORY and not self.export_path:
            raise ConfigurationError("An export path is required for the in-memory data source",
                                     source=EXPORT_PATH_ENV)
        logger.info(f"Store configured: {self.get_description()}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'StoreConfig':
        """Build the configuration from environment variables."""
        environ = os.environ if environ is None else environ
        raw_source = environ.get(DATA_SOURCE_ENV, DataSource.SUPABASE.value).strip().lower()
        try:
            data_source = DataSource(raw_source)
        except ValueError:
            valid = ', '.join(source.value for source in DataSource)
            raise ConfigurationError(f"{DATA_SOURCE_ENV} must be one of: {valid}", source=DATA_SOURCE_ENV)

        return cls(data_source=data_source, export_path=environ.get(EXPORT_PATH_ENV))

    def get_description(self) -> str:
        """Get human-readable description of store configuration."""
        if self.data_source == DataSource.MEMORY:
            return f"DataSource={self.data_source.value} ({self.export_path})"
        return f"DataSource={self.data_source.value}"
