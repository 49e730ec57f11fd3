import logging
import os
from dotenv import load_dotenv
from pathlib import Path

load_dotenv()


def _read_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _read_private_key() -> str | None:
    """
    В .env ключ обычно хранится одной строкой с литеральными "\\n".
    """
    value = _read_env("GOOGLE_PRIVATE_KEY")
    if value is None:
        return None
    return value.replace("\\n", "\n")


def resolve_log_level(value: str | None) -> str:
    level = (value or "INFO").upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


def build_range(sheet_name: str, columns: str) -> str:
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'!{columns}"


PROJECT_ROOT = Path(__file__).resolve().parents[1]

SPREADSHEET_ID = _read_env("GOOGLE_SPREADSHEET_ID")
SERVICE_ACCOUNT_EMAIL = _read_env("GOOGLE_SERVICE_ACCOUNT_EMAIL")
PRIVATE_KEY = _read_private_key()
CREDENTIALS = _read_env("GOOGLE_CREDENTIALS") or "credentials.json"

FORM_FIELDS_SHEET = _read_env("FORM_FIELDS_SHEET") or "FormFields"
FORM_FIELDS_COLUMNS = _read_env("FORM_FIELDS_COLUMNS") or "A:G"
FORM_FIELDS_RANGE = build_range(FORM_FIELDS_SHEET, FORM_FIELDS_COLUMNS)

LOG_LEVEL = resolve_log_level(_read_env("LOG_LEVEL"))
