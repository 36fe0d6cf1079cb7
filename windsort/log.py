from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = '[%(levelname)s] %(message)s'
HANDLER_NAME = 'windsort'


def setup_logging(level=None) -> logging.Logger:
    """Attach one stderr handler to the ``windsort`` logger. Safe to call twice."""
    if level is None:
        level = os.getenv('WINDSORT_LOG_LEVEL', 'WARNING')
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger = logging.getLogger('windsort')
    logger.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger
