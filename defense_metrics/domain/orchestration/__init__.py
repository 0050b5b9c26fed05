from .metrics_orchestrator import MetricsOrchestrator
