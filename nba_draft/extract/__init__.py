"""
Extract Layer - Pure I/O to External Sources

This layer handles fetching the raw draft projections CSV.
- No imports from transform or load layers
- Writes the response body as-is, no parsing
- Errors are logged and propagated, never retried
"""
