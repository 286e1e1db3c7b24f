"""
Utility functions module.

Time Semantics:
- Signal timestamps are instants; naive datetimes are taken to be UTC
- Output timestamps always carry an explicit offset and millisecond precision
"""
