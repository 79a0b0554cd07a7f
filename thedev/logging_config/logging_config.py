import logging
import logging.handlers
import os
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(app_name: str = "thedev-backend", log_dir: str | None = None) -> None:
    """Configure application logging

    Args:
        app_name: Name to use for log files
        log_dir: Directory for rotating log files. Console only when unset,
            since managed hosts usually have a read-only filesystem.

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # Configuring twice would duplicate every record
    global _configured
    if _configured:
        return
    _configured = True

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if not log_dir:
        return

    log_path = Path(log_dir)
    os.makedirs(log_path, exist_ok=True)

    # File handler with rotation
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}.log",
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Add error file handler for ERROR and above
    error_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}-error.log",
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    root_logger.addHandler(error_handler)
