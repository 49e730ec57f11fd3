# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from form_api.main import app
from form_api.services.form_fields import FormFieldsGateway, get_gateway


class FakeRangeStore:
    """Хранит таблицу в памяти и записывает все вызовы, как это делал бы Sheets API."""

    def __init__(self, table=None):
        self.table = [list(row) for row in (table or [])]
        self.calls = []
        self.fail_on = set()

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail_on:
            raise ConnectionError(f"{name} failed")

    def read_range(self, spreadsheet_id, range_spec):
        self._record("read_range", spreadsheet_id, range_spec)
        return [list(row) for row in self.table]

    def clear_range(self, spreadsheet_id, range_spec):
        self._record("clear_range", spreadsheet_id, range_spec)
        self.table = []

    def write_range(self, spreadsheet_id, range_spec, table):
        self._record("write_range", spreadsheet_id, range_spec, table)
        self.table = self.table + [list(row) for row in table]


@pytest.fixture
def store():
    return FakeRangeStore()


@pytest.fixture
def spreadsheet_id():
    return "test-spreadsheet"


@pytest.fixture
def range_spec():
    return "'FormFields'!A:G"


@pytest.fixture
def gateway(store, spreadsheet_id, range_spec):
    return FormFieldsGateway(spreadsheet_id, store, range_spec)


@pytest.fixture
def client(gateway):
    """TestClient, в котором шлюз к таблице подменён на FakeRangeStore."""
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.pop(get_gateway, None)
