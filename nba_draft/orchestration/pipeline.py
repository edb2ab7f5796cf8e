"""
Pipeline Orchestrator

Runs the whole workflow in one call:
1. Fetch the draft projections CSV
2. Load it into the nba_draft table (truncate-then-insert)
3. Read the table back
4. Optionally exercise insert / update / read / delete on a throwaway record

This is a library entry point; the CLI only does record-level operations.
"""

import logging
from typing import Any, Dict, Optional

import duckdb

from nba_draft.coreutils.settings import Settings, load_settings

# Extract layer imports
from nba_draft.extract.csv_fetcher import fetch_csv

# Load layer imports
from nba_draft.load.csv_loader import load_csv_to_db
from nba_draft.load.record_store import (
    connect_db,
    delete_record,
    insert_record,
    read_record_by_id,
    read_records,
    update_record,
)

logger = logging.getLogger(__name__)

SMOKE_CHECK_ID = "new-player"


def run_crud_smoke_check(conn: duckdb.DuckDBPyConnection) -> bool:
    """
    Insert, update, read and delete a throwaway record

    Args:
        conn: Open connection to a database with the nba_draft table

    Returns:
        bool: True if every step behaved as expected
    """
    logger.info("🔄 Running CRUD smoke check...")

    insert_record(
        conn, "New Player", "SG", SMOKE_CHECK_ID, 2023, 0.5, 0.1, 0.3, 0.4, 0.2
    )
    logger.info("Inserted new record.")

    update_record(conn, SMOKE_CHECK_ID, "Updated Player", "PF", 2023, 0.6)

    record = read_record_by_id(conn, SMOKE_CHECK_ID)
    if record is None:
        logger.error(f"❌ No record found with ID {SMOKE_CHECK_ID} after insert")
        return False
    logger.info(f"Record with ID {SMOKE_CHECK_ID}: {record}")

    updated_ok = (
        record.player == "Updated Player"
        and record.position == "PF"
        and record.projected_spm == 0.6
        and record.superstar == 0.1
    )
    if not updated_ok:
        logger.error(f"❌ Update was not applied as expected: {record}")

    delete_record(conn, SMOKE_CHECK_ID)
    record = read_record_by_id(conn, SMOKE_CHECK_ID)
    if record is not None:
        logger.error(f"❌ Record with ID {SMOKE_CHECK_ID} still present: {record}")
        return False
    logger.info(f"No record found with ID {SMOKE_CHECK_ID}.")

    if updated_ok:
        logger.info("✅ CRUD smoke check passed")
    return updated_ok


class PipelineOrchestrator:
    """Orchestrates the fetch and load steps for one settings object"""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the Pipeline orchestrator

        Args:
            settings: Paths and source URL (read from the environment if not provided)
        """
        self.settings = settings or load_settings()

    def run_extract(self) -> str:
        """Download the CSV, returns its path"""
        logger.info("🔄 Step 1: Fetching CSV...")
        fetch_csv(
            self.settings.source_url,
            self.settings.csv_file_name,
            self.settings.data_dir,
        )
        return self.settings.csv_file_path

    def run_load(self, csv_file_path: str) -> int:
        """Load the CSV into the database, returns the number of rows"""
        logger.info("🔄 Step 2: Loading CSV into DuckDB...")
        return load_csv_to_db(csv_file_path, self.settings.db_file_path)

    def run_full(self, smoke_check: bool = True) -> Dict[str, Any]:
        """
        Run fetch, load, read-back and (optionally) the CRUD smoke check

        Args:
            smoke_check: Whether to exercise CRUD on a throwaway record

        Returns:
            dict: Results and statistics
        """
        logger.info("🚀 Starting NBA draft pipeline")
        logger.info("=" * 50)

        try:
            csv_file_path = self.run_extract()
            rows_loaded = self.run_load(csv_file_path)

            logger.info("🔄 Step 3: Reading records back...")
            conn = connect_db(self.settings.db_file_path)
            try:
                records = read_records(conn)
                for record in records:
                    logger.debug(f"Record: {record}")
                logger.info(f"Read {len(records)} records")

                smoke_check_passed = None
                if smoke_check:
                    smoke_check_passed = run_crud_smoke_check(conn)
            finally:
                conn.close()

        except Exception as e:
            logger.error(f"❌ Pipeline failed: {e}")
            raise

        logger.info("✅ Pipeline completed")
        return {
            "csv_file": csv_file_path,
            "rows_loaded": rows_loaded,
            "records": len(records),
            "smoke_check": smoke_check_passed,
        }


def run_full_pipeline(
    settings: Optional[Settings] = None, smoke_check: bool = True
) -> Dict[str, Any]:
    """Run the complete pipeline with the given (or environment) settings"""
    return PipelineOrchestrator(settings).run_full(smoke_check=smoke_check)
