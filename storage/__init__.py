from .base import Storage
from .json_storage import JsonStorage
from .text_storage import TextFileStorage

__all__ = ["Storage", "JsonStorage", "TextFileStorage"]
