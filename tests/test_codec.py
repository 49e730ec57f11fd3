import pytest

from sheets_table import codec

HEADER = ["id", "label", "type", "required", "options"]


def test_decode_empty_table():
    assert codec.decode([]) == []
    assert codec.decode(None) == []


def test_decode_header_only():
    assert codec.decode([HEADER]) == []


def test_decode_header_without_options_leaves_options_absent():
    table = [["id", "label", "type", "required"], ["f1", "Name", "text", "TRUE"]]
    assert codec.decode(table) == [{"id": "f1", "label": "Name", "type": "text", "required": True}]


@pytest.mark.parametrize("cell", ["FALSE", "", "yes", "true", " TRUE"])
def test_decode_required_only_literal_true(cell):
    [record] = codec.decode([["required"], [cell]])
    assert record == {"required": False}


def test_decode_required_true():
    [record] = codec.decode([["required"], ["TRUE"]])
    assert record["required"] is True


def test_decode_options_are_trimmed():
    [record] = codec.decode([["id", "options"], ["f1", "a, b ,c"]])
    assert record["options"] == ["a", "b", "c"]


def test_decode_empty_options_cell_is_absent():
    [record] = codec.decode([["id", "options"], ["f1", ""]])
    assert record == {"id": "f1"}


def test_decode_short_row_fills_missing_cells():
    [record] = codec.decode([HEADER, ["f1"]])
    assert record == {"id": "f1", "label": "", "type": "", "required": False}


def test_decode_empty_row():
    [record] = codec.decode([HEADER, []])
    assert record == {"id": "", "label": "", "type": "", "required": False}


def test_decode_ignores_unknown_columns_and_follows_header_order():
    table = [
        ["note", "type", "id", "label"],
        ["internal", "select", "color", "Colour", "extra cell"],
    ]
    assert codec.decode(table) == [{"type": "select", "id": "color", "label": "Colour"}]


def test_decode_keeps_unknown_type_verbatim():
    [record] = codec.decode([["type"], ["slider"]])
    assert record["type"] == "slider"


def test_decode_duplicate_column_last_wins():
    table = [["label", "label", "options", "options"], ["first", "second", "a,b", ""]]
    assert codec.decode(table) == [{"label": "second"}]


def test_decode_row_count_matches_table():
    table = [HEADER] + [[f"f{idx}"] for idx in range(5)]
    assert len(codec.decode(table)) == 5


def test_encode_empty_emits_header():
    assert codec.encode([]) == [HEADER]


def test_encode_record():
    records = [{"id": "f2", "label": "Bio", "type": "textarea", "required": False, "options": ["a", "b"]}]
    assert codec.encode(records) == [HEADER, ["f2", "Bio", "textarea", "FALSE", "a, b"]]


def test_encode_absent_options_and_required():
    assert codec.encode([{"id": "f1", "label": "Name", "type": "text"}]) == [
        HEADER,
        ["f1", "Name", "text", "FALSE", ""],
    ]


def test_round_trip_preserves_records():
    records = [
        {"id": "name", "label": "Name", "type": "text", "required": True},
        {"id": "bio", "label": "", "type": "textarea", "required": False},
        {"id": "size", "label": "Size", "type": "select", "required": True, "options": ["S", "M", "L"]},
        {"id": "when", "label": "Date", "type": "date", "required": False, "options": ["only"]},
    ]
    assert codec.decode(codec.encode(records)) == records


def test_encode_of_decoded_table_is_stable():
    table = codec.encode(
        [
            {"id": "site", "label": "Site", "type": "url", "required": True},
            {"id": "agree", "label": "Agree", "type": "checkbox", "required": False, "options": ["yes", "no"]},
        ]
    )
    assert codec.encode(codec.decode(table)) == table


def test_decode_matches_header_names_exactly():
    assert codec.decode([[" id"], ["f1"]]) == [{}]
    assert codec.decode([[" id", "options ", "label"], ["f1", "a", "Name"]]) == [{"label": "Name"}]
