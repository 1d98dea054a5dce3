"""Logging helper for refract-mson.

Diagnostics (unsupported ``select``/``option`` nodes, omitted malformed
pieces) go through standard library loggers namespaced under
``refract_mson``.

Example:
    >>> from refract_mson.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("skipping select element")
"""

from __future__ import annotations

import logging

_ROOT = "refract_mson"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger with the "refract_mson." prefix

    Example:
        >>> get_logger("renderers").name
        'refract_mson.renderers'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
