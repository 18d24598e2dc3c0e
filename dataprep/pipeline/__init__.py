"""Row-transformation pipeline stages.

Stage order: infer -> missing -> clean -> deduplicate -> features -> validate.
Every stage is a pure function from a table (plus context) to a new table.
"""
