# utils/config.py
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger("storefront.config")


@dataclass
class Settings:
    data_dir: Path = Path("data/storage")
    log_dir: Path = Path("data/logs")
    log_level: str = "INFO"
    log_backup_days: int = 7
    ranking_seed: Optional[int] = None   # fixed seed -> repeatable "top %" values


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_int(key: str) -> Optional[int]:
    raw = env_get(key)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key}={raw!r}")
        return None


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    # Read .env (if any) then STOREFRONT_* environment variables.
    # Variables already set in the environment win over .env values.
    load_dotenv(dotenv_path)

    backup_days = _env_int("STOREFRONT_LOG_BACKUP_DAYS")
    return Settings(
        data_dir=Path(env_get("STOREFRONT_DATA_DIR", "data/storage")),
        log_dir=Path(env_get("STOREFRONT_LOG_DIR", "data/logs")),
        log_level=env_get("STOREFRONT_LOG_LEVEL", "INFO").upper(),
        log_backup_days=backup_days if backup_days is not None and backup_days > 0 else 7,
        ranking_seed=_env_int("STOREFRONT_RANKING_SEED"),
    )
