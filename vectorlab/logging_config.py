# -*- coding: utf-8 -*-
"""
Logging Configuration
Sets up the package logger for the playground.
"""
import logging
import sys
from typing import Optional, Union

from vectorlab import config


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'vectorlab' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"). Defaults to
            config.LOG_LEVEL, which reads VECTORLAB_LOG_LEVEL.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("vectorlab")
    logger.setLevel(level)

    # Streamlit reruns the script on every interaction, so drop old handlers
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

    logger.debug("Logging initialized.")
    return logger
