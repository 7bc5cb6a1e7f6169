"""Per-record summaries and the ordered file index."""
