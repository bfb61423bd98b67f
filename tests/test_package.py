"""Tests for the package surface."""
import escposkit
from escposkit import SequenceBuilder, default_builder


def test_version_is_string():
    assert isinstance(escposkit.__version__, str)


def test_default_builder_is_cached():
    assert default_builder() is default_builder()
    assert isinstance(default_builder(), SequenceBuilder)


def test_receipt_composition():
    builder = default_builder()
    job = b"".join([
        builder.encoding("CP437"),
        builder.center(builder.quad_size(b"SHOP")),
        builder.bold(b"TOTAL") + b" 12.50\n",
        builder.barcode(b"978014300723", text_position="BELOW"),
        builder.partial_cut(),
    ])
    assert job.startswith(b"\x1bt\x00\x1ba\x01\x1b!\x30SHOP\x1b!\x00\x1ba\x00")
    assert job.endswith(b"\x1dV\x01")
