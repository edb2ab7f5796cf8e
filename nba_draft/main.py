"""
Main Entry Point - Record CLI

Insert, read, update or delete a single draft prospect in an existing
database. Loading the CSV is done by nba_draft.orchestration.pipeline, not
from here.
"""

import argparse
import logging
import sys
from typing import List, Optional

import duckdb

from nba_draft.coreutils.logging import setup_logging
from nba_draft.coreutils.settings import load_settings
from nba_draft.load.record_store import (
    connect_db,
    delete_record,
    insert_record,
    read_record_by_id,
    update_record,
)

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def int32(value: str) -> int:
    """argparse type for values stored in an INTEGER column"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")

    if not INT32_MIN <= number <= INT32_MAX:
        raise argparse.ArgumentTypeError(
            f"{value} is out of range for a 32-bit integer"
        )
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nba-draft", description="NBA draft projections record store"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    insert = subparsers.add_parser("insert", help="Insert a new record")
    insert.add_argument("--player", required=True)
    insert.add_argument("--position", required=True)
    insert.add_argument("--id", required=True)
    insert.add_argument("--draft-year", type=int32, required=True)
    insert.add_argument("--projected-spm", type=float, required=True)
    insert.add_argument("--superstar", type=float, required=True)
    insert.add_argument("--starter", type=float, required=True)
    insert.add_argument("--role-player", type=float, required=True)
    insert.add_argument("--bust", type=float, required=True)

    read = subparsers.add_parser("read", help="Read a record by ID")
    read.add_argument("--id", required=True)

    update = subparsers.add_parser("update", help="Update a record by ID")
    update.add_argument("--id", required=True)
    update.add_argument("--new-player", required=True)
    update.add_argument("--new-position", required=True)
    update.add_argument("--new-draft-year", type=int32, required=True)
    update.add_argument("--new-projected-spm", type=float, required=True)

    delete = subparsers.add_parser("delete", help="Delete a record by ID")
    delete.add_argument("--id", required=True)

    return parser


def run_command(conn: duckdb.DuckDBPyConnection, args: argparse.Namespace) -> None:
    """Dispatch parsed arguments to the record store and print the outcome"""
    if args.command == "insert":
        insert_record(
            conn,
            args.player,
            args.position,
            args.id,
            args.draft_year,
            args.projected_spm,
            args.superstar,
            args.starter,
            args.role_player,
            args.bust,
        )
        print(f"Inserted record with ID: {args.id}")

    elif args.command == "read":
        record = read_record_by_id(conn, args.id)
        if record is not None:
            print(f"Record found: {record}")
        else:
            print(f"No record found with ID: {args.id}")

    elif args.command == "update":
        update_record(
            conn,
            args.id,
            args.new_player,
            args.new_position,
            args.new_draft_year,
            args.new_projected_spm,
        )
        print(f"Updated record with ID: {args.id}")

    elif args.command == "delete":
        delete_record(conn, args.id)
        print(f"Deleted record with ID: {args.id}")

    else:
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point, returns the process exit code"""
    args = build_parser().parse_args(argv)

    settings = load_settings()
    setup_logging(log_dir=settings.log_dir)

    try:
        conn = connect_db(settings.db_file_path)
        try:
            run_command(conn, args)
        finally:
            conn.close()

    except (duckdb.Error, OSError) as e:
        logger.error(f"❌ {args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
