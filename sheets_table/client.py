import json
import os
from typing import Any, Callable, Dict, Union

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from sheets_table.codec import Table


SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

CredentialsSource = Union[str, Dict[str, Any], Credentials]


def _load_credentials(creds_source: CredentialsSource) -> Credentials:
    if isinstance(creds_source, Credentials):
        return creds_source

    if isinstance(creds_source, dict):
        return Credentials.from_service_account_info(creds_source, scopes=SCOPES)

    if isinstance(creds_source, str):
        if os.path.isfile(creds_source):
            return Credentials.from_service_account_file(creds_source, scopes=SCOPES)
        try:
            data = json.loads(creds_source)
        except json.JSONDecodeError as exc:
            raise FileNotFoundError(f"Credentials file '{creds_source}' not found") from exc
        return Credentials.from_service_account_info(data, scopes=SCOPES)

    raise TypeError("Unsupported credentials source type")


def build_sheets_service(creds_source: CredentialsSource):
    creds = _load_credentials(creds_source)
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


class SheetsRangeStore:
    """
    Чтение и перезапись диапазона листа через spreadsheets.values.

    Сервис создаётся при первом обращении и дальше переиспользуется,
    поэтому ошибки credentials всплывают на первом запросе, а не на старте.
    """

    def __init__(self, service_factory: Callable[[], Any]):
        self._service_factory = service_factory
        self._service = None

    @property
    def service(self):
        if self._service is None:
            self._service = self._service_factory()
        return self._service

    def _values(self):
        return self.service.spreadsheets().values()

    def read_range(self, spreadsheet_id: str, range_spec: str) -> Table:
        response = self._values().get(spreadsheetId=spreadsheet_id, range=range_spec).execute()
        return response.get("values") or []

    def clear_range(self, spreadsheet_id: str, range_spec: str) -> None:
        self._values().clear(spreadsheetId=spreadsheet_id, range=range_spec, body={}).execute()

    def write_range(self, spreadsheet_id: str, range_spec: str, table: Table) -> None:
        self._values().append(
            spreadsheetId=spreadsheet_id,
            range=range_spec,
            valueInputOption="RAW",
            body={"values": table},
        ).execute()
