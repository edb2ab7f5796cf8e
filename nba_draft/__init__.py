"""
NBA Draft Projections Pipeline

Extract -> transform -> load of the FiveThirtyEight historical draft
projections into a local DuckDB table, plus record-level CRUD and a CLI.
"""
