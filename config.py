from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent

STORAGE_FORMAT = "text"
TEXT_PATH = str(PROJECT_ROOT / "transactions.txt")
JSON_PATH = str(PROJECT_ROOT / "transactions.json")
BACKUP_ON_SAVE = True

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
