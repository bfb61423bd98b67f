"""Tests for paper cut and cash drawer commands."""
from escposkit import SequenceBuilder
from escposkit.table import default_table


def test_partial_cut():
    assert SequenceBuilder().partial_cut() == b"\x1dV\x01"


def test_full_cut():
    assert SequenceBuilder().full_cut() == b"\x1dV\x00"
    assert SequenceBuilder().cut() == SequenceBuilder().full_cut()


def test_open_cash_drawer_kicks_both_pins():
    table = default_table()
    out = SequenceBuilder().open_cash_drawer()
    assert out == table["CD_KICK_2"] + b"\x00" + table["CD_KICK_5"] + b"\x00"
    assert out == b"\x1bp\x00\x00\x1bp\x01\x00"


def test_builder_shares_default_table():
    assert SequenceBuilder().table is default_table()
