"""
Logging Configuration
=====================
Handlers for the 'wiremodels' logger.

The library modules only create module loggers (`logging.getLogger(__name__)`)
and never configure handlers themselves. The command line entry point and the
test suite call `setup_logging` once to decide where those records go:
generator builds are logged at DEBUG, model check problems at WARNING and
rejected generator parameters at ERROR.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configures the 'wiremodels' logger, replacing any handlers it already has.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the log to.
        stream: Console stream, defaults to the current sys.stdout.
    """
    logger = logging.getLogger("wiremodels")
    logger.setLevel(level)

    # Calling this again (CLI run inside tests, reconfiguration) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at level %s.", logging.getLevelName(level))
