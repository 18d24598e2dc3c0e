"""Pipeline configuration loading and validation."""
