"""
CSV Loader - Load Layer

Replaces the contents of the nba_draft table with the records of a CSV
snapshot.
"""

import logging

from nba_draft.transformation.transformers import frame_to_prospects, read_prospect_csv
from nba_draft.transformation.validators import validate_data_quality
from .database import TABLE_NAME, connect_db, create_table, transaction
from .record_store import INSERT_SQL

logger = logging.getLogger(__name__)


def load_csv_to_db(csv_file_path: str, db_file_path: str) -> int:
    """
    Load a draft projections CSV into the nba_draft table

    The table is created if absent, emptied, and refilled inside a single
    transaction, so a failed load leaves the previous contents in place.

    Args:
        csv_file_path: Path to the fetched CSV
        db_file_path: DuckDB database file

    Returns:
        int: Number of rows inserted
    """
    logger.info(f"🔄 Loading {csv_file_path} into {db_file_path}")

    prospects_df = read_prospect_csv(csv_file_path)
    validate_data_quality(prospects_df)

    conn = connect_db(db_file_path)
    try:
        with transaction(conn):
            create_table(conn)
            conn.execute(f"DELETE FROM {TABLE_NAME}")

            rows = frame_to_prospects(prospects_df)
            if rows:
                conn.executemany(INSERT_SQL, rows)
    finally:
        conn.close()

    logger.info(f"✅ Loaded {len(rows)} records into {TABLE_NAME}")
    return len(rows)
