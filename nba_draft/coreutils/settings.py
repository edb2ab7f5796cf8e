"""
Runtime settings for the draft pipeline and CLI.

Paths can be overridden from the environment (or a .env file); the source URL
is fixed.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # take environment variables from .env

SOURCE_URL = (
    "https://raw.githubusercontent.com/fivethirtyeight/data/refs/heads/master/"
    "nba-draft-2015/historical_projections.csv"
)

DEFAULT_DATA_DIR = "data"
DEFAULT_CSV_FILE_NAME = "nba_draft.csv"
DEFAULT_DB_FILE_NAME = "nba_db.duckdb"
DEFAULT_LOG_DIR = "logs"


@dataclass(frozen=True)
class Settings:
    """Where the pipeline reads from and writes to"""

    source_url: str = SOURCE_URL
    data_dir: str = DEFAULT_DATA_DIR
    csv_file_name: str = DEFAULT_CSV_FILE_NAME
    db_file_path: str = os.path.join(DEFAULT_DATA_DIR, DEFAULT_DB_FILE_NAME)
    log_dir: Optional[str] = DEFAULT_LOG_DIR

    @property
    def csv_file_path(self) -> str:
        return os.path.join(self.data_dir, self.csv_file_name)


def load_settings() -> Settings:
    """
    Build Settings from the environment

    Environment variables:
        NBA_DRAFT_DATA_DIR: directory for the downloaded CSV (default: data)
        NBA_DRAFT_DB_PATH: DuckDB file (default: <data dir>/nba_db.duckdb)
        NBA_DRAFT_LOG_DIR: log file directory, empty string disables file logs

    Returns:
        Settings: resolved settings
    """
    data_dir = os.getenv("NBA_DRAFT_DATA_DIR", DEFAULT_DATA_DIR)
    db_file_path = os.getenv(
        "NBA_DRAFT_DB_PATH", os.path.join(data_dir, DEFAULT_DB_FILE_NAME)
    )
    log_dir = os.getenv("NBA_DRAFT_LOG_DIR", DEFAULT_LOG_DIR) or None

    return Settings(data_dir=data_dir, db_file_path=db_file_path, log_dir=log_dir)
