"""Utility modules for refract-mson.

Provides:
- text: indent, format_value for building MSON blocks
- logger: get_logger for diagnostics
"""

from refract_mson.utils.logger import get_logger
from refract_mson.utils.text import format_value, indent

__all__ = [
    "format_value",
    "get_logger",
    "indent",
]
