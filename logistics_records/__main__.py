"""Command-line entry point: ``python -m logistics_records``."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .config import Settings
from .console import Console
from .logger import configure_logging, get_logger
from .services import LogisticsService, seed_demo_data

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logistics-records",
        description="Manage warehouses, customers, employees, orders, reviews and equipment.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: LOGISTICS_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--seed",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Load demo records before the first menu",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    if args.log_level:
        settings.log_level = args.log_level.upper()
    if args.seed is not None:
        settings.seed_demo_data = args.seed
    configure_logging(settings.log_level)

    service = LogisticsService()
    if settings.seed_demo_data:
        seed_demo_data(service)
    logger.debug("Starting console with %s", service.counts())
    Console(service).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
