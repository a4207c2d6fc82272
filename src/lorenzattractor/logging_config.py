"""
Logging Configuration
Sets up the global logger for the application.
"""
import logging
import sys
from typing import Optional

NUMBA_LOG_LEVEL = logging.WARNING


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'lorenzattractor' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("lorenzattractor")
    logger.setLevel(level)

    # Avoid duplicate handlers when the window is reopened in the same process
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # numba's compiler chatter floods DEBUG output
    logging.getLogger("numba").setLevel(max(level, NUMBA_LOG_LEVEL))

    logger.info("Logging initialized.")
