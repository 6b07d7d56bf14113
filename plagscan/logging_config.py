"""
Logging configuration for plagscan.

Console logging with timestamps; noisy third-party loggers are quieted.
"""
import logging
import sys

from plagscan.config import settings

_logging_configured = False


def setup_logging(app_name='plagscan'):
    """Configure application logging once and return the root app logger"""
    global _logging_configured

    if _logging_configured:
        return logging.getLogger(app_name)

    log_level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logging.getLogger('urllib3').setLevel(logging.WARNING)

    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)

    _logging_configured = True
    return logger


def get_logger(name):
    """Get a logger in the plagscan namespace (e.g. 'checker', 'web_search')"""
    return logging.getLogger(f'plagscan.{name}')
