"""Diagnostics package.

- easter_table: always available, plain-text table of Easter and anchors
- easter_scatter: optional (requires the ``diagnostics`` extra: numpy, matplotlib)
"""

__all__ = ["easter_table", "easter_scatter"]
