"""
Orchestration Layer - Pipeline Runs

Strings the fetch, CSV load and read-back steps together into one run,
with an optional insert/update/delete check on a throwaway record.
Nothing here parses or stores data itself.
"""
