from __future__ import annotations

import json
import logging
from typing import Any, Callable, List, Optional, Protocol

import pydantic

from form_api import config, schemas
from form_api.services import sheets_config
from sheets_table import codec
from sheets_table.codec import FieldRecord, Table

logger = logging.getLogger(__name__)


class FormFieldsError(Exception):
    status_code = 500
    expose_cause = False

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(FormFieldsError):
    """Не указан GOOGLE_SPREADSHEET_ID."""


class ValidationError(FormFieldsError):
    """Тело запроса не похоже на список полей формы."""

    status_code = 400


class RemoteIOError(FormFieldsError):
    """Ошибка при обращении к Google Sheets (сеть, доступ, лист не найден)."""

    expose_cause = True


class RangeStore(Protocol):
    def read_range(self, spreadsheet_id: str, range_spec: str) -> Table: ...

    def clear_range(self, spreadsheet_id: str, range_spec: str) -> None: ...

    def write_range(self, spreadsheet_id: str, range_spec: str, table: Table) -> None: ...


class FormFieldsGateway:
    """
    Читает и полностью перезаписывает таблицу полей формы.

    Запись идёт в два шага (clear, затем append) без транзакции: если второй
    шаг упал, диапазон остаётся пустым, и об этом сообщается как об ошибке записи.
    """

    def __init__(self, spreadsheet_id: Optional[str], store: RangeStore, range_spec: str):
        self.spreadsheet_id = spreadsheet_id
        self.store = store
        self.range_spec = range_spec

    def _ensure_configured(self) -> str:
        if not self.spreadsheet_id:
            raise ConfigurationError("Spreadsheet ID not configured")
        return self.spreadsheet_id

    def _call(self, message: str, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except Exception as exc:
            logger.exception("%s (range=%s)", message, self.range_spec)
            raise RemoteIOError(message, cause=exc) from exc

    def handle_read(self) -> List[FieldRecord]:
        spreadsheet_id = self._ensure_configured()
        table = self._call(
            "Error fetching form fields",
            self.store.read_range,
            spreadsheet_id,
            self.range_spec,
        )
        records = codec.decode(table)
        logger.info("Loaded %d form fields from %s", len(records), self.range_spec)
        return records

    def handle_write(self, form_fields: Any) -> None:
        spreadsheet_id = self._ensure_configured()
        records = _validate_records(form_fields)
        table = codec.encode(records)

        message = "Error updating form fields"
        self._call(message, self.store.clear_range, spreadsheet_id, self.range_spec)
        self._call(message, self.store.write_range, spreadsheet_id, self.range_spec, table)
        logger.info("Replaced %s with %d form fields", self.range_spec, len(records))

    def handle_write_body(self, body: bytes) -> None:
        """Конфигурация проверяется до разбора тела, как и в handle_write."""
        self._ensure_configured()
        self.handle_write(_extract_form_fields(body))


def _extract_form_fields(body: bytes) -> Any:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        logger.warning("Rejected form fields body: %s", exc)
        raise ValidationError("Invalid JSON body.", cause=exc) from exc
    if not isinstance(payload, dict):
        return None
    return payload.get("formFields")


def _validate_records(form_fields: Any) -> List[FieldRecord]:
    if not isinstance(form_fields, list):
        logger.warning("Rejected form fields payload of type %s", type(form_fields).__name__)
        raise ValidationError("Invalid data format. Expected an array of form fields.")

    records: List[FieldRecord] = []
    for index, item in enumerate(form_fields):
        try:
            field = schemas.FormField.model_validate(item)
        except pydantic.ValidationError as exc:
            logger.warning("Rejected form field #%d: %s", index, exc)
            raise ValidationError(f"Invalid form field at index {index}.", cause=exc) from exc
        records.append(field.model_dump(exclude_none=True))
    return records


def get_gateway() -> FormFieldsGateway:
    return FormFieldsGateway(config.SPREADSHEET_ID, sheets_config.get_store(), config.FORM_FIELDS_RANGE)
