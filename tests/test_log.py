import logging

from windsort.log import HANDLER_NAME, setup_logging


def test_setup_logging_from_env(monkeypatch):
    monkeypatch.setenv('WINDSORT_LOG_LEVEL', 'debug')
    logger = setup_logging()
    try:
        assert logger.name == 'windsort'
        assert logger.level == logging.DEBUG
        setup_logging('info')
        assert logger.level == logging.INFO
        assert sum(1 for h in logger.handlers if h.get_name() == HANDLER_NAME) == 1
    finally:
        for h in list(logger.handlers):
            if h.get_name() == HANDLER_NAME:
                logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)


def test_unknown_level_falls_back_to_warning():
    logger = setup_logging('chatty')
    try:
        assert logger.level == logging.WARNING
    finally:
        for h in list(logger.handlers):
            if h.get_name() == HANDLER_NAME:
                logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
