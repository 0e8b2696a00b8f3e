"""
Helper utilities for WeatherGraph.

Provides the application data directory lookup and logging setup.
"""

import os
import sys
import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from weathergraph import constants

# Thread lock for logging setup
_logging_lock: threading.Lock = threading.Lock()


def get_app_data_path() -> Path:
    """
    Retrieve (and create) the directory holding the log and config files.

    Honors the WEATHERGRAPH_HOME override, then APPDATA, then the user's home.
    """
    logger = logging.getLogger(__name__)
    base: Optional[str] = os.getenv(constants.app.ENV_VAR_HOME) or os.getenv("APPDATA")
    if base:
        path = Path(base) / constants.app.APP_NAME
    else:
        path = Path.home() / f".{constants.app.APP_NAME.lower()}"
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check permissions or path validity.") from e
    return path


def setup_logging() -> logging.Logger:
    """
    Configure logging with both a rotating file handler and a console handler in a thread-safe manner.
    """
    logger: logging.Logger = logging.getLogger(constants.app.APP_NAME)
    with _logging_lock:
        if not logger.handlers:
            is_production = os.environ.get(constants.app.ENV_VAR_PROD_MODE, "").lower() == "true"
            root_log_level = constants.logs.PRODUCTION_LOG_LEVEL if is_production else logging.DEBUG
            logger.setLevel(root_log_level)

            log_formatter = logging.Formatter(
                fmt=constants.logs.LOG_FORMAT, datefmt=constants.logs.LOG_DATE_FORMAT
            )

            # File Handler
            file_log_level = constants.logs.PRODUCTION_LOG_LEVEL if is_production else constants.logs.FILE_LOG_LEVEL
            try:
                log_file_path: Path = get_app_data_path() / constants.logs.LOG_FILENAME
                file_handler = RotatingFileHandler(
                    log_file_path,
                    maxBytes=constants.logs.MAX_LOG_SIZE,
                    backupCount=constants.logs.LOG_BACKUP_COUNT,
                    encoding='utf-8',
                    delay=True
                )
                file_handler.setFormatter(log_formatter)
                file_handler.setLevel(file_log_level)
                logger.addHandler(file_handler)
            except OSError as e:
                print(f"CRITICAL: Failed to set up file logging: {e}. File logging will be disabled.", file=sys.stderr)

            # Console Handler
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(log_formatter)
            console_log_level = constants.logs.PRODUCTION_LOG_LEVEL if is_production else constants.logs.CONSOLE_LOG_LEVEL
            console_handler.setLevel(console_log_level)
            logger.addHandler(console_handler)

            if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
                logger.info("File logging level: %s", logging.getLevelName(file_log_level))
            else:
                logger.warning("File logging is NOT active due to previous errors.")
            logger.info("Logging initialized. Production mode: %s. Root Log Level: %s.",
                        is_production, logging.getLevelName(root_log_level))

    return logger
