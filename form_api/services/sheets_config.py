from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from form_api import config
from sheets_table.client import SheetsRangeStore, build_sheets_service

TOKEN_URI = "https://oauth2.googleapis.com/token"


def _resolve_path(path_value: str) -> Path:
    path = Path(path_value)
    if not path.is_absolute():
        path = config.PROJECT_ROOT / path
    return path


def get_credentials_kind() -> str:
    if config.SERVICE_ACCOUNT_EMAIL and config.PRIVATE_KEY:
        return "service_account_env"
    if config.CREDENTIALS.lstrip().startswith("{"):
        return "inline_json"
    return "file"


def get_credentials_source() -> str | Dict[str, Any]:
    """
    Email + private key из окружения имеют приоритет, затем GOOGLE_CREDENTIALS
    (путь к файлу или сам JSON), затем credentials.json в корне проекта.
    """
    kind = get_credentials_kind()
    if kind == "service_account_env":
        return {
            "type": "service_account",
            "client_email": config.SERVICE_ACCOUNT_EMAIL,
            "private_key": config.PRIVATE_KEY,
            "token_uri": TOKEN_URI,
        }
    if kind == "inline_json":
        return config.CREDENTIALS
    return str(_resolve_path(config.CREDENTIALS))


def get_settings() -> Dict[str, Any]:
    return {
        "configured": bool(config.SPREADSHEET_ID),
        "spreadsheet_id": config.SPREADSHEET_ID or "",
        "range": config.FORM_FIELDS_RANGE,
        "credentials_kind": get_credentials_kind(),
    }


@lru_cache
def get_store() -> SheetsRangeStore:
    return SheetsRangeStore(lambda: build_sheets_service(get_credentials_source()))
