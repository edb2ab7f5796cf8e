"""
Test CSV Loader - Truncate-then-insert into the nba_draft table
"""

import logging
import os
import sys

import duckdb
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from nba_draft.load.csv_loader import load_csv_to_db
from nba_draft.load.record_store import connect_db, read_record_by_id, read_records

HEADER = "Player,Position,ID,Draft Year,Projected SPM,Superstar,Starter,Role Player,Bust\n"

FIRST_SNAPSHOT = (
    HEADER
    + "Karl-Anthony Towns,C,karl-anthony-towns,2015,1.34,0.42,0.32,0.19,0.07\n"
    + "Jahlil Okafor,C,jahlil-okafor,2015,0.17,0.12,0.28,0.37,0.23\n"
)

SECOND_SNAPSHOT = (
    HEADER
    + "D'Angelo Russell,PG,dangelo-russell,2015,0.88,0.24,0.36,0.26,0.14\n"
)


def _write(path, text):
    path.write_text(text)
    return str(path)


def _read_all(db_path):
    conn = connect_db(db_path)
    try:
        return read_records(conn)
    finally:
        conn.close()


def test_load_inserts_every_complete_row(tmp_path):
    csv_path = _write(tmp_path / "draft.csv", FIRST_SNAPSHOT)
    db_path = str(tmp_path / "nba_db.duckdb")

    rows_loaded = load_csv_to_db(csv_path, db_path)

    assert rows_loaded == 2
    records = _read_all(db_path)
    assert {r.id for r in records} == {"karl-anthony-towns", "jahlil-okafor"}

    conn = connect_db(db_path)
    try:
        assert read_record_by_id(conn, "karl-anthony-towns") == (
            "Karl-Anthony Towns", "C", "karl-anthony-towns", 2015, 1.34, 0.42, 0.32, 0.19, 0.07
        )
    finally:
        conn.close()


def test_short_row_is_skipped_and_bad_year_becomes_zero(tmp_path, caplog):
    csv_text = (
        HEADER
        + "Short Row,SG,short-row,2015,0.1,0.1,0.1,0.1\n"
        + "Bad Year,SF,bad-year,unknown,0.5,0.1,0.2,0.3,0.4\n"
    )
    csv_path = _write(tmp_path / "draft.csv", csv_text)
    db_path = str(tmp_path / "nba_db.duckdb")

    with caplog.at_level(logging.WARNING):
        rows_loaded = load_csv_to_db(csv_path, db_path)

    assert rows_loaded == 1
    assert "Skipping record, not enough fields" in caplog.text

    records = _read_all(db_path)
    assert [r.id for r in records] == ["bad-year"]
    assert records[0].draft_year == 0
    assert records[0].projected_spm == 0.5


def test_loading_twice_keeps_only_second_snapshot(tmp_path):
    db_path = str(tmp_path / "nba_db.duckdb")

    load_csv_to_db(_write(tmp_path / "first.csv", FIRST_SNAPSHOT), db_path)
    load_csv_to_db(_write(tmp_path / "second.csv", SECOND_SNAPSHOT), db_path)

    assert [r.id for r in _read_all(db_path)] == ["dangelo-russell"]


def test_loading_same_snapshot_twice_does_not_duplicate(tmp_path):
    csv_path = _write(tmp_path / "draft.csv", FIRST_SNAPSHOT)
    db_path = str(tmp_path / "nba_db.duckdb")

    load_csv_to_db(csv_path, db_path)
    load_csv_to_db(csv_path, db_path)

    assert len(_read_all(db_path)) == 2


def test_header_only_csv_empties_table(tmp_path):
    db_path = str(tmp_path / "nba_db.duckdb")
    load_csv_to_db(_write(tmp_path / "first.csv", FIRST_SNAPSHOT), db_path)

    rows_loaded = load_csv_to_db(_write(tmp_path / "empty.csv", HEADER), db_path)

    assert rows_loaded == 0
    assert _read_all(db_path) == []


def test_failed_load_keeps_previous_rows(tmp_path):
    """An insert failure rolls back the truncate as well"""
    db_path = str(tmp_path / "nba_db.duckdb")
    conn = connect_db(db_path)
    conn.execute(
        """
        CREATE TABLE nba_draft (
            Player VARCHAR,
            Position VARCHAR,
            ID VARCHAR CHECK (ID <> 'rejected-id'),
            DraftYear INTEGER,
            ProjectedSPM DOUBLE,
            Superstar DOUBLE,
            Starter DOUBLE,
            RolePlayer DOUBLE,
            Bust DOUBLE
        )
        """
    )
    conn.close()

    load_csv_to_db(_write(tmp_path / "first.csv", FIRST_SNAPSHOT), db_path)

    failing_snapshot = (
        HEADER
        + "D'Angelo Russell,PG,dangelo-russell,2015,0.88,0.24,0.36,0.26,0.14\n"
        + "Rejected,PG,rejected-id,2015,0.1,0.1,0.1,0.1,0.1\n"
    )
    with pytest.raises(duckdb.Error):
        load_csv_to_db(_write(tmp_path / "failing.csv", failing_snapshot), db_path)

    assert {r.id for r in _read_all(db_path)} == {"karl-anthony-towns", "jahlil-okafor"}


def test_missing_csv_does_not_touch_database(tmp_path):
    db_path = tmp_path / "nba_db.duckdb"

    with pytest.raises(FileNotFoundError):
        load_csv_to_db(str(tmp_path / "missing.csv"), str(db_path))

    assert not db_path.exists()


def test_extra_columns_are_not_loaded(tmp_path):
    csv_text = (
        HEADER.rstrip("\n") + ",Notes\n"
        + "Karl-Anthony Towns,C,karl-anthony-towns,2015,1.34,0.42,0.32,0.19,0.07,top pick\n"
    )
    db_path = str(tmp_path / "nba_db.duckdb")

    assert load_csv_to_db(_write(tmp_path / "draft.csv", csv_text), db_path) == 1
    assert _read_all(db_path) == [
        ("Karl-Anthony Towns", "C", "karl-anthony-towns", 2015, 1.34, 0.42, 0.32, 0.19, 0.07)
    ]
