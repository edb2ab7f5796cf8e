"""
Transformation Layer Schemas

Column layout of a draft prospect row, shared by the CSV parser, the DuckDB
table and the record store.
"""

from typing import NamedTuple

import polars as pl

# Positional CSV columns, in file order
PROSPECT_COLUMNS = [
    "Player",
    "Position",
    "ID",
    "DraftYear",
    "ProjectedSPM",
    "Superstar",
    "Starter",
    "RolePlayer",
    "Bust",
]

EXPECTED_FIELD_COUNT = len(PROSPECT_COLUMNS)

INTEGER_COLUMNS = ["DraftYear"]
FLOAT_COLUMNS = ["ProjectedSPM", "Superstar", "Starter", "RolePlayer", "Bust"]

# Raw records as read from the CSV: every field is text
RAW_PROSPECT_SCHEMA = pl.Schema([(name, pl.String()) for name in PROSPECT_COLUMNS])

DRAFT_PROSPECT_SCHEMA = pl.Schema(
    [
        ("Player", pl.String()),
        ("Position", pl.String()),
        ("ID", pl.String()),
        ("DraftYear", pl.Int32()),
        ("ProjectedSPM", pl.Float64()),
        ("Superstar", pl.Float64()),
        ("Starter", pl.Float64()),
        ("RolePlayer", pl.Float64()),
        ("Bust", pl.Float64()),
    ]
)


class DraftProspect(NamedTuple):
    """One draft-eligible player's projection scores"""

    player: str
    position: str
    id: str
    draft_year: int
    projected_spm: float
    superstar: float
    starter: float
    role_player: float
    bust: float
