"""Byte-level adapters between files and in-memory tables."""
