"""Command line entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .gauges import build_gauges
from .server import run
from .translator import Translator

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """Configure root logging for the exporter.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...).
        format_string: Custom format string for log messages.
    """
    if format_string is None:
        format_string = "%(levelname)s %(name)s: %(message)s"

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=format_string)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Ambient Weather station -> Prometheus exporter")
    p.add_argument("-p", "--port", type=int, default=2184,
                   help="Http server port to listen on (default: 2184)")
    p.add_argument("--prefix", default="",
                   help="add metrics prefix <prefix>_<metric_name>")
    p.add_argument("--station-name", default="",
                   help="Weather station name for the 'name' label on the metrics")
    p.add_argument("--verbose", action="store_true",
                   help="More verbose logging")
    p.add_argument("-v", "--version", action="store_true",
                   help="Show version and exit")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "INFO")
    logger.info("ambientweather-exporter version %s on Python %s", __version__, sys.version.split()[0])

    if args.version:
        return 0

    gauges = build_gauges(args.station_name, args.prefix)
    run(args.port, Translator(gauges), gauges.registry)
    return 0
