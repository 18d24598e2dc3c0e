"""Application logging and the rejected-row log."""
