"""
Transformation Layer - CSV Records to Prospect Rows

Splits raw CSV records into accepted and skipped ones, then casts the
accepted fields to prospect types (unparseable numbers become zero).
No network or database access.
"""
