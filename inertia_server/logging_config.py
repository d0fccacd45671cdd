import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import config


def setup_logging() -> None:
    """Configure logging for the adapter, optionally writing logs to file."""
    level = getattr(logging, str(config.LOGGING.LEVEL).upper(), logging.INFO)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(stream_handler)

    log_file = str(config.LOGGING.FILE or "").strip()
    if not log_file:
        return
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=int(config.LOGGING.MAX_BYTES),
        backupCount=int(config.LOGGING.BACKUP_COUNT),
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
