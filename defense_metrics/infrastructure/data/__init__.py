from .in_memory_store import InMemoryMetricsStore
