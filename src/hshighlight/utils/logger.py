"""Logger factory for hshighlight.

Every module logs through the standard library under the ``hshighlight``
namespace, so applications can tune the whole package with one
``logging.getLogger("hshighlight")`` call. Nothing is configured here.

Example:
    >>> from hshighlight.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropped %d token(s)", 2)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for ``name``.

    Names outside the package are nested under ``hshighlight.``.

    Example:
        >>> get_logger("mymodule").name
        'hshighlight.mymodule'
        >>> get_logger("hshighlight.driver").name
        'hshighlight.driver'
    """
    if not (name == "hshighlight" or name.startswith("hshighlight.")):
        name = f"hshighlight.{name}"
    return logging.getLogger(name)
