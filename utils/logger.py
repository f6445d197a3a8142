# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "storefront"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(log_file: Path, backup_days: int) -> list[logging.Handler]:
    # One file per day under log_dir, plus the console.
    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        backupCount=backup_days,
        encoding="utf-8",
    )
    return [file_handler, logging.StreamHandler()]


def setup_logger(log_dir: str | Path = "data/logs", level: str | int = logging.INFO,
                 backup_days: int = 7) -> logging.Logger:
    """
    Configure the shared "storefront" logger and return it.

    Service modules log to "storefront.<area>" children (storefront.vendors,
    storefront.discounts, storefront.repository) which propagate here.
    Calling it again only updates the level; handlers are attached once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_dir / "storefront.log", backup_days):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_dir} at {logging.getLevelName(logger.level)}, "
                f"keeping {backup_days} days")
    return logger
