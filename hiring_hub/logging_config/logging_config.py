import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_HANDLER_NAME = "hiring-hub-console"
FILE_HANDLER_NAME = "hiring-hub-file"


def setup_logging(app_name: str = "hiring-hub-setup", log_dir: Optional[str] = None) -> None:
    """Configure logging for a layout run

    Log lines always go to the console. When a log directory is given (or set
    through LOG_DIR) each run is also appended to ``<log_dir>/<app_name>.log``.
    Calling this again does not add a second set of handlers.

    Args:
        app_name: Name to use for the log file
        log_dir: Directory for the log file, defaults to the LOG_DIR variable

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)
    installed = {handler.get_name() for handler in root_logger.handlers}

    if CONSOLE_HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    log_dir = log_dir or os.getenv("LOG_DIR")
    if log_dir and FILE_HANDLER_NAME not in installed:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / f"{app_name}.log",
            maxBytes=1_000_000,  # 1MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # googleapiclient logs every discovery lookup at INFO
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)
