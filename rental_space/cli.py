"""Command line entry point for rental-space."""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rental_space.config import LOG_FORMATS, RentalSpaceConfig, StorageConfig
from rental_space.controller import MenuController
from rental_space.exceptions import RentalSpaceError
from rental_space.generators import populate_store
from rental_space.logging import setup_logging
from rental_space.session import Session
from rental_space.store.csv_store import RecordRepository
from rental_space.ui import ConsoleUI

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rental-space",
        description="Monash Rental Space: browse, wishlist and apply for rental properties",
    )
    parser.add_argument(
        "--db-dir",
        type=Path,
        default=None,
        help="Directory holding the record CSV files (default: $RENTAL_DB_DIR or db)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: $LOG_FORMAT or standard)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to this file instead of stderr",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("run", help="Start the interactive menu (default)")

    seed_parser = subparsers.add_parser("seed", help="Add generated sample records to the database")
    seed_parser.add_argument(
        "--tenants",
        type=int,
        default=10,
        help="Number of tenants to generate (default: 10)",
    )
    seed_parser.add_argument(
        "--properties",
        type=int,
        default=20,
        help="Number of properties to generate (default: 20)",
    )
    seed_parser.add_argument(
        "--applications",
        type=int,
        default=10,
        help="Number of past applications to generate (default: 10)",
    )
    seed_parser.add_argument(
        "--wishlists",
        type=int,
        default=10,
        help="Number of wishlist entries to generate (default: 10)",
    )
    seed_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> RentalSpaceConfig:
    """Environment config with command line overrides applied."""
    config = RentalSpaceConfig.from_env()
    if args.db_dir is not None:
        config.storage = StorageConfig(db_dir=args.db_dir)
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.log_file is not None:
        config.log_file = args.log_file
    return config


def run_app(repository: RecordRepository, ui: ConsoleUI | None = None) -> None:
    """Load records and run the interactive menu."""
    session = Session.open(repository)
    MenuController(session, ui or ConsoleUI()).run()


def seed_database(repository: RecordRepository, args: argparse.Namespace) -> None:
    """Append generated records to the database and flush it."""
    store = populate_store(
        repository.load_all(),
        num_tenants=args.tenants,
        num_properties=args.properties,
        num_applications=args.applications,
        num_wishlists=args.wishlists,
        seed=args.seed,
    )
    repository.flush(store)
    summary = store.summary()
    print(f"Records in {repository.storage.db_dir}:")
    for record_type, count in summary.items():
        print(f"  {record_type}: {count}")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except RentalSpaceError as e:
        parser.error(str(e))

    setup_logging(config.log_level, config.log_format, config.log_file)
    repository = RecordRepository(config.storage)

    try:
        if args.command == "seed":
            seed_database(repository, args)
        else:
            run_app(repository)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except RentalSpaceError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
