"""Read-only analytics over a cleaned table."""
