"""
Data Validators - Transform Layer

Pure functions for validating raw records and transformed prospect data.
"""

import polars as pl
from typing import Dict, Any, Sequence
from .schemas import DRAFT_PROSPECT_SCHEMA, EXPECTED_FIELD_COUNT
import logging

logger = logging.getLogger(__name__)


def has_expected_field_count(
    record: Sequence[str], expected: int = EXPECTED_FIELD_COUNT
) -> bool:
    """
    Check that a raw CSV record carries at least the expected number of fields

    Extra trailing fields are allowed and ignored downstream.
    """
    return len(record) >= expected


def validate_prospect_schema(df: pl.DataFrame) -> bool:
    """
    Validate prospects data matches expected schema

    Args:
        df: Prospects DataFrame

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if df.schema != DRAFT_PROSPECT_SCHEMA:
        raise ValueError(
            f"Schema mismatch: expected {DRAFT_PROSPECT_SCHEMA}, got {df.schema}"
        )

    logger.info(f"Prospects schema validation passed: {df.height} records")
    return True


def validate_data_quality(df: pl.DataFrame) -> Dict[str, Any]:
    """
    Collect quality metrics for prospects data

    Duplicate IDs are reported but not rejected, the table does not enforce
    uniqueness.

    Args:
        df: Prospects DataFrame

    Returns:
        Dict: Quality metrics
    """
    quality_metrics = {
        "total_records": df.height,
        "duplicate_ids": df.height - df["ID"].n_unique(),
        "empty_ids": df.filter(pl.col("ID") == "").height,
    }

    if quality_metrics["duplicate_ids"] > 0:
        logger.warning(
            f"Duplicate records found for 'ID': {quality_metrics['duplicate_ids']}"
        )

    if quality_metrics["empty_ids"] > 0:
        logger.warning(f"Records with empty 'ID': {quality_metrics['empty_ids']}")

    return quality_metrics
