"""
Shared utilities for AKAFO Menu.

Common functionality used across contexts:
- Logger setup
- Canteen configuration
- Timestamp conversion
- Plain-text menu formatting
"""

from akafo.utils.timestamp import format_date, from_struct_time, now

__all__ = ["format_date", "from_struct_time", "now"]
