from __future__ import annotations

import logging

from config import JSON_PATH, LOG_FORMAT, LOG_LEVEL, STORAGE_FORMAT, TEXT_PATH
from storage.base import Storage
from storage.json_storage import JsonStorage
from storage.text_storage import TextFileStorage

STORAGE_FORMATS = ("text", "json")


def configure_logging(level: str | int = LOG_LEVEL) -> None:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT)


def bootstrap_storage(storage_format: str = STORAGE_FORMAT, data_path: str | None = None) -> Storage:
    fmt = (storage_format or "").strip().lower()
    if fmt == "text":
        return TextFileStorage(data_path or TEXT_PATH)
    if fmt == "json":
        return JsonStorage(data_path or JSON_PATH)
    raise ValueError(f"Unsupported storage format: {storage_format}. Must be one of {STORAGE_FORMATS}")
