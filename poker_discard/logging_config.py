"""
logging_config.py

Logging setup for a CLI run; modules obtain loggers with get_logger(__name__)
"""
import logging
import os
from datetime import datetime
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", log_dir: str = "logs", log_to_file: bool = False) -> Optional[str]:
    """
    Configure the root logger once for a CLI run.

    Log records go to stderr so stdout carries only result lines. With
    ``log_to_file`` a timestamped file is also written under ``log_dir``;
    its path is returned.
    """
    handlers = [logging.StreamHandler()]
    log_filename = None
    if log_to_file:
        # Create logs directory
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filename = os.path.join(log_dir, f"poker_discard_{timestamp}.log")
        handlers.append(logging.FileHandler(log_filename, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    return log_filename


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
