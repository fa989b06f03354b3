"""Centralized logging configuration for the character service."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from character_api.config import Settings

_CONFIGURED = False


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging once per process.

    Structure:
    - logs/api.log: requests, dataset loading and general service activity
    - Console: same level as the log file
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    settings = settings or Settings.from_env()

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_level = getattr(logging, settings.log_level, logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    api_handler = logging.handlers.RotatingFileHandler(
        log_dir / "api.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    api_handler.setLevel(log_level)
    api_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(api_handler)

    # Reduce noise from uvicorn access logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _CONFIGURED = True
    logging.info("Logging configured: %s", log_dir / "api.log")
    logging.info("Log level: %s", settings.log_level)
