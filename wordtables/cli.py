#!/usr/bin/env python3
"""
Word Tables CLI
Builds the per-length word tables and the letter ratings table from one or
more word lists.

Usage:
    # Build tables from two word lists
    init-word-tables nouns.txt adjectives.txt

    # Compute everything but leave the database untouched
    init-word-tables nouns.txt --dry-run

    # Use an explicit config file and schema
    init-word-tables nouns.txt --config config.json --schema words
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import psycopg

from .config import WordTablesConfig, setup_logging
from .errors import ConfigError, SourceError
from .pipeline import ScoringResult, run_pipeline
from .sources import open_word_sources

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build word and letter rating tables from word lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("files", nargs="*", type=Path,
                        help="Word list files, one word per line (UTF-8)")
    parser.add_argument("--config", type=Path, default=None,
                        help="JSON config file with a 'db' section")
    parser.add_argument("--schema", default=None,
                        help="Target schema (overrides configuration)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Score the words without writing to the database")
    parser.add_argument("--log-level", default=WordTablesConfig.LOGGING['level'],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    parser.add_argument("--no-progress", dest="progress", action="store_false",
                        help="Hide the progress bar while scanning word lists")
    parser.set_defaults(progress=True)
    return parser.parse_args(argv)


def print_summary(result: ScoringResult):
    """Print per-bucket word counts and the top scoring words."""
    print("=" * 50)
    print("WORD TABLES SUMMARY")
    print("=" * 50)
    stats = result.stats
    print(f"Lines read:   {stats.lines_read:>10,}")
    print(f"Admitted:     {stats.admitted:>10,}")
    print(f"Duplicates:   {stats.duplicates:>10,}")
    print(f"Rejected:     {stats.rejected:>10,}")
    print()
    for length, count in result.summary().items():
        records = sorted(result.word_records(length), key=lambda r: r.score, reverse=True)
        top = ", ".join(f"{r.word} ({r.score})" for r in records[:3])
        print(f"words{length}: {count:>8,} words  {top}")


def write_tables(result: ScoringResult, config_file: Optional[Path], schema: Optional[str]):
    """Open the database and persist the result."""
    from .database_manager import DatabaseManager
    from .persistence import PostgresTableWriter
    from .secure_config import configure

    db_config = configure(config_file).get_database_config()
    with DatabaseManager(db_config, schema=schema) as db_manager:
        info = db_manager.get_connection_info()
        logger.info(f"Writing tables to {info['database']} on {info['host']}:{info['port']} "
                    f"(schema {info['schema']})")
        PostgresTableWriter(db_manager).write(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        with open_word_sources(args.files) as sources:
            result = run_pipeline(sources, WordTablesConfig.WORD_LENGTHS, show_progress=args.progress)
    except SourceError as e:
        logger.error(str(e))
        return 1

    if args.dry_run:
        print_summary(result)
        print("[OK] Dry run complete, database not modified")
        return 0

    try:
        write_tables(result, args.config, args.schema)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except psycopg.Error as e:
        logger.error(f"Database error, no tables were changed: {e}")
        return 1

    print("[OK] Tables created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
