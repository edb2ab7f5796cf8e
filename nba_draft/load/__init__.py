"""
Load Layer - Data Persistence

This layer handles all DuckDB persistence operations.
- Connection factory and table DDL
- Bulk CSV load (truncate-then-insert in one transaction)
- Record-level CRUD
"""
