"""
DuckDB Database - Load Layer

Connection factory, table definition and unit-of-work helper for the
nba_draft table.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

import duckdb

logger = logging.getLogger(__name__)

TABLE_NAME = "nba_draft"

# Production table: ID is unique by convention only
CREATE_TABLE_SQL = f"""
    CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
        Player VARCHAR,
        Position VARCHAR,
        ID VARCHAR,
        DraftYear INTEGER,
        ProjectedSPM DOUBLE,
        Superstar DOUBLE,
        Starter DOUBLE,
        RolePlayer DOUBLE,
        Bust DOUBLE
    )
"""


def connect_db(db_file_path: str) -> duckdb.DuckDBPyConnection:
    """
    Open (or create) the DuckDB database at db_file_path

    No schema is created or checked here.

    Args:
        db_file_path: Database file, or ":memory:"

    Returns:
        duckdb.DuckDBPyConnection: Open connection
    """
    logger.debug(f"Connecting to DuckDB at {db_file_path}")
    return duckdb.connect(db_file_path)


def create_table(conn: duckdb.DuckDBPyConnection) -> None:
    """Create the nba_draft table if it does not exist"""
    conn.execute(CREATE_TABLE_SQL)


@contextmanager
def transaction(conn: duckdb.DuckDBPyConnection) -> Iterator[duckdb.DuckDBPyConnection]:
    """
    Run the enclosed statements as one unit of work

    Commits on success, rolls back and re-raises on any error.
    """
    conn.begin()
    try:
        yield conn
    except Exception as e:
        logger.error(f"❌ Rolling back transaction: {e}")
        conn.rollback()
        raise
    else:
        conn.commit()
