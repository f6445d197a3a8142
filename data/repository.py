# data/repository.py
import json
import logging
from pathlib import Path

logger = logging.getLogger("storefront.repository")


class DataLoadError(RuntimeError):
    """Raised by strict reads when a data file exists but cannot be loaded."""


class DataRepository:
    # Read-only access to the storefront snapshots the summary is built from:
    #   products.json -> popular products
    #   orders.json   -> the user's past orders (with lineItems)

    def __init__(self, storage_dir: str | Path = "data/storage"):
        self.storage_dir = Path(storage_dir)

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str, strict: bool = False):
        # Missing or empty file -> [].
        # Corrupted or unreadable -> [] (fail safe), or DataLoadError when strict.
        path = self._file_path(filename)
        if not path.exists():
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except OSError as e:
            return self._load_failed(path, e, strict)
        if text == "":
            return []
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            return self._load_failed(path, e, strict)

    def _load_failed(self, path: Path, error: Exception, strict: bool):
        if strict:
            raise DataLoadError(f"Could not load {path}: {error}") from error
        logger.warning(f"Could not load {path}, treating as empty: {error}")
        return []

    def _read_list(self, filename: str, strict: bool) -> list:
        data = self._read_json(filename, strict=strict)
        if isinstance(data, list):
            return data
        # Shopify-style {"products": [...]} / {"orders": [...]} wrappers
        if isinstance(data, dict):
            key = filename.rsplit(".", 1)[0]
            inner = data.get(key)
            if isinstance(inner, list):
                return inner
        if strict:
            raise DataLoadError(f"{self._file_path(filename)} does not contain a list")
        logger.warning(f"{self._file_path(filename)} does not contain a list, treating as empty")
        return []

    def get_products(self, strict: bool = False) -> list[dict]:
        return self._read_list("products.json", strict)

    def get_orders(self, strict: bool = False) -> list[dict]:
        return self._read_list("orders.json", strict)
