"""Utility modules for hshighlight.

Provides:
- logger: get_logger for logging
- text: escape_html for rendering
"""

from hshighlight.utils.logger import get_logger
from hshighlight.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
