"""Services composing the pure pipeline with I/O, logging and sessions."""
