"""JSONL parsing and record collection."""
