"""
Data Transformers - Transform Layer

Turns raw CSV records into a typed prospects DataFrame.

Parsing policy: the first three fields are kept verbatim as text, the
remaining six are cast to Int32 / Float64 and any value that does not parse
becomes zero. Records with fewer than nine fields are skipped with a warning.
"""

import csv
import logging
import os
from typing import Iterable, List, Sequence

import polars as pl

from .schemas import (
    DRAFT_PROSPECT_SCHEMA,
    EXPECTED_FIELD_COUNT,
    FLOAT_COLUMNS,
    INTEGER_COLUMNS,
    RAW_PROSPECT_SCHEMA,
    DraftProspect,
)
from .validators import has_expected_field_count, validate_prospect_schema

logger = logging.getLogger(__name__)


def coerce_prospect_types(raw_df: pl.DataFrame) -> pl.DataFrame:
    """
    Cast raw text columns to their prospect types

    Casts are non-strict, so unparseable values become null and are then
    filled with zero.

    Args:
        raw_df: DataFrame with RAW_PROSPECT_SCHEMA

    Returns:
        pl.DataFrame: DataFrame with DRAFT_PROSPECT_SCHEMA
    """
    return raw_df.with_columns(
        [
            pl.col(name).cast(pl.Int32(), strict=False).fill_null(0)
            for name in INTEGER_COLUMNS
        ]
        + [
            pl.col(name).cast(pl.Float64(), strict=False).fill_null(0.0)
            for name in FLOAT_COLUMNS
        ]
    ).select(list(DRAFT_PROSPECT_SCHEMA.names()))


def records_to_frame(records: Sequence[Sequence[str]]) -> pl.DataFrame:
    """
    Build a typed prospects DataFrame from accepted raw records

    Only the first nine fields of each record are used.

    Args:
        records: Raw records that passed the field-count check

    Returns:
        pl.DataFrame: Prospects data with DRAFT_PROSPECT_SCHEMA
    """
    if not records:
        return pl.DataFrame(schema=DRAFT_PROSPECT_SCHEMA)

    raw_df = pl.DataFrame(
        [list(record[:EXPECTED_FIELD_COUNT]) for record in records],
        schema=RAW_PROSPECT_SCHEMA,
        orient="row",
    )
    prospects_df = coerce_prospect_types(raw_df)

    validate_prospect_schema(prospects_df)
    return prospects_df


def filter_complete_records(records: Iterable[List[str]]) -> List[List[str]]:
    """
    Keep records with enough fields, warn about the rest

    Blank lines produce no record and are dropped silently.
    """
    accepted = []
    for record in records:
        if not record:
            continue

        if not has_expected_field_count(record):
            logger.warning(f"Skipping record, not enough fields: {record}")
            continue

        accepted.append(record)

    return accepted


def read_prospect_csv(csv_file_path: str) -> pl.DataFrame:
    """
    Read the draft projections CSV into a typed DataFrame

    The header row is skipped and columns are taken by position.

    Args:
        csv_file_path: Path to the CSV file

    Returns:
        pl.DataFrame: Prospects data with DRAFT_PROSPECT_SCHEMA
    """
    if not os.path.exists(csv_file_path):
        raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

    with open(csv_file_path, "r", newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        next(reader, None)
        accepted = filter_complete_records(reader)

    prospects_df = records_to_frame(accepted)
    logger.info(f"Parsed {prospects_df.height} prospect records from {csv_file_path}")
    return prospects_df


def frame_to_prospects(df: pl.DataFrame) -> List[DraftProspect]:
    """Convert a prospects DataFrame into DraftProspect tuples"""
    return [DraftProspect(*row) for row in df.iter_rows()]
