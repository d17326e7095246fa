"""
Operator command for maintaining the remote movie collection.

Not reachable from the Streamlit app. Run it when the table is new or when
rows were added without embeddings.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from movie_match.core.maintenance import (
    MaintenanceReport,
    backfill_missing_embeddings,
    format_report,
    seed_if_empty,
)
from movie_match.core.repository import MovieRepository
from movie_match.embedders.base import get_embedder
from movie_match.loaders.csv_catalog import CsvCatalogLoader
import config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movie-match-admin",
        description="Seed and repair the Movie Match collection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s seed                      # Insert the bundled catalog if the table is empty
  %(prog)s seed --catalog my.csv     # Seed from another CSV
  %(prog)s backfill                  # Embed rows whose embedding is NULL
        """
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output the report as JSON instead of human-readable text"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    seed = subparsers.add_parser("seed", help="Populate an empty collection from the catalog")
    seed.add_argument(
        "--catalog", "-c",
        type=Path,
        default=config.CATALOG_PATH,
        help=f"Catalog CSV (default: {config.CATALOG_PATH.name})"
    )

    subparsers.add_parser("backfill", help="Compute missing embeddings for existing rows")

    return parser


def run(args: argparse.Namespace) -> MaintenanceReport:
    """Execute the requested operation and return its report."""
    repository = MovieRepository()
    embedder = get_embedder(config.DEFAULT_EMBEDDER)

    if args.command == "seed":
        catalog = CsvCatalogLoader(args.catalog).records()
        return seed_if_empty(repository, embedder, catalog)

    return backfill_missing_embeddings(repository, embedder)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        report = run(args)
    except Exception as e:
        logger.debug("Maintenance aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, default=str))
    else:
        print(format_report(report))

    return 0 if report.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
