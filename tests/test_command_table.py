"""Tests for the command table loader."""
import copy
import json

import pytest

from escposkit import SequenceBuilder
from escposkit.errors import CommandTableError, CommandTableNotFoundError
from escposkit.resources import load_table_data
from escposkit.table import (
    CodePage,
    CommandTable,
    REQUIRED_COMMANDS,
    default_table,
    load_command_table,
)


def test_default_table_has_required_commands():
    table = load_command_table()
    assert REQUIRED_COMMANDS <= set(table)


def test_default_table_is_cached():
    assert load_command_table() is default_table()
    assert default_table() is default_table()


def test_default_table_values():
    table = default_table()
    assert table["TXT_BOLD_ON"] == b"\x1b\x45\x01"
    assert table["TXT_INVERT_ON"] == b"\x1d\x42\x01"
    assert table["BARCODE_EAN13"] == b"\x1d\x6b\x02"
    assert table["BARCODE_PDF417"] == b"\x1d\x28\x6b"
    assert table["PAPER_PARTIAL_CUT"] == b"\x1d\x56\x01"
    assert table["CD_KICK_5"] == b"\x1b\x70\x01"
    assert table["CP_SET"] == b"\x1b\x74"


def test_table_is_read_only():
    table = default_table()
    with pytest.raises(TypeError):
        table["TXT_BOLD_ON"] = b"\x00"


def test_unknown_command_raises_key_error():
    with pytest.raises(KeyError):
        default_table()["NOT_A_COMMAND"]


def test_code_page_lookup():
    table = default_table()
    page = table.code_page(" cp850 ")
    assert page == CodePage(name="CP850", codec="cp850", code=2)
    assert table.code_page("CP999") is None


def test_missing_commands_rejected():
    with pytest.raises(CommandTableError) as exc:
        CommandTable.from_dict({"commands": {"TXT_NORMAL": [27, 33, 0]}})
    assert "TXT_BOLD_ON" in str(exc.value)


def test_missing_commands_section_rejected():
    with pytest.raises(CommandTableError):
        CommandTable.from_dict({"code_pages": {}})


def test_byte_out_of_range_rejected():
    data = copy.deepcopy(load_table_data())
    data["commands"]["TXT_BOLD_ON"] = [27, 69, 300]
    with pytest.raises(CommandTableError):
        CommandTable.from_dict(data)


def test_non_integer_values_rejected():
    data = copy.deepcopy(load_table_data())
    data["commands"]["TXT_BOLD_ON"] = "1b4501"
    with pytest.raises(CommandTableError):
        CommandTable.from_dict(data)


def test_invalid_code_page_rejected():
    data = copy.deepcopy(load_table_data())
    data["code_pages"]["CP437"] = {"codec": "cp437", "code": 999}
    with pytest.raises(CommandTableError):
        CommandTable.from_dict(data)


def test_load_custom_table(tmp_path):
    data = copy.deepcopy(load_table_data())
    data["commands"]["TXT_BOLD_ON"] = [27, 69, 9]
    path = tmp_path / "table.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    table = load_command_table(path)
    builder = SequenceBuilder(table)
    assert builder.bold(b"x") == b"\x1bE\x09x\x1bE\x00"
    # The packaged table is untouched.
    assert default_table()["TXT_BOLD_ON"] == b"\x1bE\x01"


def test_load_missing_file(tmp_path):
    with pytest.raises(CommandTableNotFoundError):
        load_command_table(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CommandTableError):
        load_command_table(path)
