"""
Record Store - Load Layer

Record-level CRUD over the nba_draft table. Every function takes an open
connection; none of them create the table.
"""

import logging
from typing import List, Optional

import duckdb

from nba_draft.transformation.schemas import DraftProspect
from .database import TABLE_NAME, connect_db  # noqa: F401 (re-exported)

logger = logging.getLogger(__name__)

SELECT_COLUMNS = (
    "Player, Position, ID, DraftYear, ProjectedSPM, Superstar, Starter, RolePlayer, Bust"
)

INSERT_SQL = f"""
    INSERT INTO {TABLE_NAME} ({SELECT_COLUMNS})
    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


def insert_record(
    conn: duckdb.DuckDBPyConnection,
    player: str,
    position: str,
    id: str,
    draft_year: int,
    projected_spm: float,
    superstar: float,
    starter: float,
    role_player: float,
    bust: float,
) -> None:
    """Append a prospect row, no uniqueness check"""
    conn.execute(
        INSERT_SQL,
        [
            player,
            position,
            id,
            draft_year,
            projected_spm,
            superstar,
            starter,
            role_player,
            bust,
        ],
    )
    logger.debug(f"Inserted record {id}")


def read_records(conn: duckdb.DuckDBPyConnection) -> List[DraftProspect]:
    """
    Read every row of the table

    Rows come back in storage order; no ORDER BY is applied.
    """
    rows = conn.execute(f"SELECT {SELECT_COLUMNS} FROM {TABLE_NAME}").fetchall()
    return [DraftProspect(*row) for row in rows]


def read_record_by_id(
    conn: duckdb.DuckDBPyConnection, id: str
) -> Optional[DraftProspect]:
    """
    Read the first row with the given ID

    Returns:
        Optional[DraftProspect]: The record, or None when no row matches
    """
    row = conn.execute(
        f"SELECT {SELECT_COLUMNS} FROM {TABLE_NAME} WHERE ID = ?", [id]
    ).fetchone()

    if row is None:
        return None
    return DraftProspect(*row)


def update_record(
    conn: duckdb.DuckDBPyConnection,
    id: str,
    new_player: str,
    new_position: str,
    new_draft_year: int,
    new_projected_spm: float,
) -> int:
    """
    Overwrite player, position, draft year and projected SPM

    Applies to every row with the given ID. The other score columns and the ID
    itself are left untouched.

    Returns:
        int: Number of rows updated
    """
    updated = conn.execute(
        f"""
        UPDATE {TABLE_NAME}
        SET Player = ?, Position = ?, DraftYear = ?, ProjectedSPM = ?
        WHERE ID = ?
        RETURNING ID
        """,
        [new_player, new_position, new_draft_year, new_projected_spm, id],
    ).fetchall()

    logger.debug(f"Updated {len(updated)} rows with ID {id}")
    return len(updated)


def delete_record(conn: duckdb.DuckDBPyConnection, id: str) -> int:
    """
    Delete every row with the given ID

    Deleting an ID that does not exist is not an error.

    Returns:
        int: Number of rows deleted
    """
    deleted = conn.execute(
        f"DELETE FROM {TABLE_NAME} WHERE ID = ? RETURNING ID", [id]
    ).fetchall()

    logger.info(f"✅ Row successfully deleted - {id}")
    return len(deleted)
