from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

Table = List[List[str]]
FieldRecord = Dict[str, Any]

HEADER = ["id", "label", "type", "required", "options"]
FIELD_TYPES = ("text", "textarea", "select", "date", "url", "checkbox")

TRUE_TOKEN = "TRUE"
FALSE_TOKEN = "FALSE"
OPTIONS_SEPARATOR = ", "


####################################
# CELL DECODERS
####################################

def _decode_text(cell: str) -> str:
    return cell


def _decode_required(cell: str) -> bool:
    return cell == TRUE_TOKEN


def _decode_options(cell: str) -> Optional[List[str]]:
    if not cell:
        return None
    return [opt.strip() for opt in cell.split(",")]


# header name -> (record key, decoder); a decoder returning None leaves the key unset
COLUMN_DECODERS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "id": ("id", _decode_text),
    "label": ("label", _decode_text),
    "type": ("type", _decode_text),
    "required": ("required", _decode_required),
    "options": ("options", _decode_options),
}


def _get_cell(row: List[Any], idx: int) -> str:
    if idx >= len(row) or row[idx] is None:
        return ""
    return str(row[idx])


def _decode_row(row: List[Any], columns: List[Tuple[int, str, Callable[[str], Any]]]) -> FieldRecord:
    record: FieldRecord = {}
    for idx, key, decoder in columns:
        value = decoder(_get_cell(row, idx))
        if value is None:
            record.pop(key, None)
        else:
            record[key] = value
    return record


def decode(table: Optional[List[List[Any]]]) -> List[FieldRecord]:
    """
    Превращает таблицу [[header...], [...], ...] в список описаний полей.
    Неизвестные колонки пропускаются, недостающие ячейки читаются как "".
    """
    if not table:
        return []

    header = table[0]
    columns = []
    for idx, name in enumerate(header):
        entry = COLUMN_DECODERS.get(str(name))
        if entry is not None:
            columns.append((idx, entry[0], entry[1]))

    return [_decode_row(row or [], columns) for row in table[1:]]


####################################
# ENCODER
####################################

def _encode_record(record: FieldRecord) -> List[str]:
    options = record.get("options")
    return [
        record.get("id") or "",
        record.get("label") or "",
        record.get("type") or "",
        TRUE_TOKEN if record.get("required") else FALSE_TOKEN,
        OPTIONS_SEPARATOR.join(options) if options else "",
    ]


def encode(records: Iterable[FieldRecord]) -> Table:
    """Header row first, then one row per record in input order."""
    return [list(HEADER)] + [_encode_record(record) for record in records]
