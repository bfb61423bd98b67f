"""Tests for code page selection and text transcoding."""
import pytest

from escposkit import InvalidArgument, SequenceBuilder, encode
from escposkit.table import default_table


def test_encode_plain_ascii():
    assert encode("Total", "cp437") == b"Total"


def test_encode_maps_accented_characters():
    assert encode("Café", "cp437") == b"Caf\x82"
    assert encode("Café", "cp1252") == b"Caf\xe9"


def test_encode_replaces_unmappable_with_question_mark():
    assert encode("5€ total", "cp437") == b"5? total"


def test_encode_replaces_each_character():
    assert encode("€€a€", "cp437") == b"??a?"


def test_encode_custom_replacement():
    assert encode("a€b", "cp437", replace="*") == b"a*b"


def test_encode_strict_raises():
    with pytest.raises(UnicodeEncodeError):
        encode("a€b", "cp437", errors="strict")


def test_encode_ignore():
    assert encode("a€b", "cp437", errors="ignore") == b"ab"


def test_encode_unknown_codec():
    with pytest.raises(LookupError):
        encode("a", "not-a-codec")


def test_builder_encode_with_code_page():
    page = default_table().code_page("CP866")
    assert SequenceBuilder().encode("Привет", page) == "Привет".encode("cp866")


def test_select_code_page_by_name():
    builder = SequenceBuilder()
    assert builder.encoding("CP437") == b"\x1bt\x00"
    assert builder.encoding("cp850") == b"\x1bt\x02"
    assert builder.encoding("CP1252") == b"\x1bt\x10"


def test_select_code_page_by_object():
    page = default_table().code_page("CP858")
    assert SequenceBuilder().encoding(page) == b"\x1bt\x13"


def test_select_code_page_by_number():
    assert SequenceBuilder().encoding(7) == b"\x1bt\x07"


def test_unknown_code_page_rejected():
    with pytest.raises(InvalidArgument) as exc:
        SequenceBuilder().encoding("CP999")
    assert exc.value.field == "code_page"
    assert exc.value.value == "CP999"


def test_code_page_number_out_of_range():
    with pytest.raises(InvalidArgument):
        SequenceBuilder().set_encoding(256)


def test_unencodable_replacement_rejected():
    with pytest.raises(InvalidArgument) as exc:
        encode("abc", "cp437", replace="€")
    assert exc.value.field == "replace"
    assert exc.value.value == "€"


def test_replacement_encoded_for_target_page():
    assert encode("a中", "cp1252", replace="€") == b"a\x80"
