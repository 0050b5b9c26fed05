#!/usr/bin/env python3
"""
Defensive Metrics CLI Utility

Computes the defensive metrics summary, or per-game trends, and prints them
as JSON.

Usage:
    python scripts/compute_metrics.py --source memory --export upload.json
    python scripts/compute_metrics.py --source memory --export upload.json --games g1 g2
    python scripts/compute_metrics.py --source supabase --games g1 g2 g3 --trends
"""

import argparse
import json
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from defense_metrics.application import (
    GetMetricsSummaryUseCase, GetTrendsUseCase, MetricsSummaryRequest, TrendRequest
)
from defense_metrics.domain.entities import trends_to_dict
from defense_metrics.domain.exceptions import DefenseMetricsException
from defense_metrics.domain.interfaces.rest_connection import DatabaseError
from defense_metrics.infrastructure import StoreConfig, DataSource, create_store, create_metrics_orchestrator

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False):
    """Configure logging to stderr so stdout stays valid JSON."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute defensive metrics")
    parser.add_argument('--source', choices=[s.value for s in DataSource], default=None,
                        help="Data source (defaults to DEFENSE_METRICS_DATA_SOURCE)")
    parser.add_argument('--export', help="JSON export to load for the memory source")
    parser.add_argument('--games', nargs='+', help="Game ids to include (default: all games)")
    parser.add_argument('--trends', action='store_true', help="Print per-game trends instead of a summary")
    parser.add_argument('--verbose', action='store_true', help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.source:
            config = StoreConfig(data_source=DataSource(args.source), export_path=args.export)
        else:
            config = StoreConfig.from_env()
        orchestrator = create_metrics_orchestrator(store=create_store(config))

        if args.trends:
            trends = GetTrendsUseCase(orchestrator).execute(TrendRequest(game_ids=args.games or []))
            output = trends_to_dict(trends)
        else:
            summary = GetMetricsSummaryUseCase(orchestrator).execute(MetricsSummaryRequest(game_ids=args.games))
            output = summary.to_dict()
    except (DefenseMetricsException, DatabaseError) as e:
        logger.error(f"Metrics computation failed: {e}")
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
