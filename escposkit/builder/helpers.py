"""
ESC/POS command sequence builder.

``SequenceBuilder`` composes printer command sequences from a ``CommandTable``
and caller content. Content is expected to already be in the printer's code
page (see ``escposkit.encoding.encode``); it is copied into the output
unchanged, bracketed by the relevant directives.

Every method returns ``bytes`` and keeps no state between calls, so one
builder can be shared freely.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Optional

from escposkit.builder.options import (
    Alignment,
    BarcodeFormat,
    BarcodeSpec,
    Color,
    DEFAULT_BARCODE_HEIGHT,
    DEFAULT_BARCODE_WIDTH,
    TextPosition,
    coerce_enum,
)
from escposkit.builder.pdf417 import (
    PDF417_MAX_PAYLOAD,
    PDF417_MODULE_WIDTH,
    pad_pdf417_data,
    pdf417_length_prefix,
)
from escposkit.core.binary import content, sequence
from escposkit.encoding import code_page_number, encode
from escposkit.errors import InvalidArgument
from escposkit.table import CodePage, CommandTable, default_table

logger = logging.getLogger(__name__)

NUL = b"\x00"


class SequenceBuilder:
    """
    Builds ESC/POS command sequences.

    Args:
        table: The command table to read directives from. Defaults to the
            packaged table.
    """

    def __init__(self, table: Optional[CommandTable] = None) -> None:
        self.table = table if table is not None else default_table()

    def _wrap(self, on: str, data: bytes, off: str) -> bytes:
        return self.table[on] + content(data) + self.table[off]

    # ---- text size ----
    def plain_text(self, data: bytes) -> bytes:
        return self._wrap("TXT_NORMAL", data, "TXT_NORMAL")

    def double_height(self, data: bytes) -> bytes:
        return self._wrap("TXT_2HEIGHT", data, "TXT_NORMAL")

    def double_width(self, data: bytes) -> bytes:
        return self._wrap("TXT_2WIDTH", data, "TXT_NORMAL")

    def quad_size(self, data: bytes) -> bytes:
        """Double width and double height."""
        return self._wrap("TXT_4SQUARE", data, "TXT_NORMAL")

    # ---- emphasis ----
    def underline(self, data: bytes) -> bytes:
        return self._wrap("TXT_UNDERL_ON", data, "TXT_UNDERL_OFF")

    def underline2(self, data: bytes) -> bytes:
        """Two-dot underline."""
        return self._wrap("TXT_UNDERL2_ON", data, "TXT_UNDERL_OFF")

    def bold(self, data: bytes) -> bytes:
        return self._wrap("TXT_BOLD_ON", data, "TXT_BOLD_OFF")

    def inverted(self, data: bytes) -> bytes:
        """White on black."""
        return self._wrap("TXT_INVERT_ON", data, "TXT_INVERT_OFF")

    # ---- alignment ----
    def align_left(self) -> bytes:
        return self.table[Alignment.LEFT.value]

    def align_right(self) -> bytes:
        return self.table[Alignment.RIGHT.value]

    def align_center(self) -> bytes:
        return self.table[Alignment.CENTER.value]

    def left(self, data: bytes = b"", restore: Alignment = Alignment.LEFT) -> bytes:
        """
        Left-align ``data``, then switch to ``restore``.

        The printer's previous alignment is not known to the builder; the
        restore target is left unless stated otherwise.
        """
        return self._wrap(Alignment.LEFT.value, data, coerce_enum(Alignment, "restore", restore).value)

    def right(self, data: bytes = b"", restore: Alignment = Alignment.LEFT) -> bytes:
        return self._wrap(Alignment.RIGHT.value, data, coerce_enum(Alignment, "restore", restore).value)

    def center(self, data: bytes = b"", restore: Alignment = Alignment.LEFT) -> bytes:
        return self._wrap(Alignment.CENTER.value, data, coerce_enum(Alignment, "restore", restore).value)

    # ---- color ----
    def color_black(self, data: bytes, restore: Color = Color.BLACK) -> bytes:
        return self._wrap(Color.BLACK.value, data, coerce_enum(Color, "restore", restore).value)

    def color_red(self, data: bytes, restore: Color = Color.BLACK) -> bytes:
        """Print in the alternative color (usually red) and return to ``restore``."""
        return self._wrap(Color.RED.value, data, coerce_enum(Color, "restore", restore).value)

    # ---- barcodes ----
    def barcode(
        self,
        data: bytes,
        text_position: TextPosition | str = TextPosition.OFF,
        height: Optional[int] = DEFAULT_BARCODE_HEIGHT,
        width: Optional[int] = DEFAULT_BARCODE_WIDTH,
        format: BarcodeFormat | str = BarcodeFormat.EAN13,
    ) -> bytes:
        """
        Print a one-dimensional barcode.

        Args:
            data: Barcode payload. Not checked against the symbology.
            text_position: HRI text placement (``OFF``, ``ABOVE``, ``BELOW``, ``BOTH``).
            height: Bar height in dots, 1-255.
            width: Module width, 2-6.
            format: The symbology, ``EAN13`` by default.

        Returns:
            The HRI, width, height and format directives, the payload and a
            NUL terminator.

        Raises:
            InvalidArgument: If an option is out of range. Nothing is emitted.
        """
        spec = BarcodeSpec.create(
            data,
            text_position=text_position,
            height=height,
            width=width,
            format=format,
        )
        return self.barcode_from_spec(spec)

    def barcode_from_spec(self, spec: BarcodeSpec) -> bytes:
        return b"".join([
            self.table[spec.text_position.value],
            self.table["BARCODE_WIDTH"],
            sequence([spec.width]),
            self.table["BARCODE_HEIGHT"],
            sequence([spec.height]),
            self.table[spec.format.value],
            spec.data,
            NUL,
        ])

    def pdf417(self, data: bytes) -> bytes:
        """
        Print a PDF417 two-dimensional barcode.

        Payloads whose length modulo 256 is above 120 are space-padded to the
        next multiple of 256 before the length prefix is computed.

        Raises:
            InvalidArgument: If the padded payload does not fit the two-byte
                length prefix.
        """
        data = content(data)
        text = pad_pdf417_data(data)
        if len(text) > PDF417_MAX_PAYLOAD:
            raise InvalidArgument(
                "data",
                len(data),
                f"PDF417 payload of {len(data)} bytes exceeds {PDF417_MAX_PAYLOAD} bytes after padding.",
            )
        if len(text) != len(data):
            logger.debug("pdf417 payload padded from %d to %d bytes", len(data), len(text))
        p_low, p_high = pdf417_length_prefix(text)
        return b"".join([
            self.table["BARCODE_WIDTH"],
            sequence([PDF417_MODULE_WIDTH]),
            self.table["BARCODE_PDF417"] + sequence([p_low, p_high]),
            text,
        ])

    # ---- paper and drawer ----
    def partial_cut(self) -> bytes:
        return self.table["PAPER_PARTIAL_CUT"]

    def full_cut(self) -> bytes:
        return self.table["PAPER_FULL_CUT"]

    def open_cash_drawer(self) -> bytes:
        """Kick both drawer connectors (pin 2, then pin 5)."""
        return b"".join([
            self.table["CD_KICK_2"],
            NUL,
            self.table["CD_KICK_5"],
            NUL,
        ])

    # ---- encoding ----
    def encoding(self, code_page: CodePage | str | int) -> bytes:
        """
        Select the printer's character code page.

        Args:
            code_page: A ``CodePage``, a table name such as ``"CP437"``, or
                the raw page number.

        Raises:
            InvalidArgument: If the name is not in the table.
        """
        return self.table["CP_SET"] + sequence([code_page_number(self.table, code_page)])

    def encode(self, text: str, encoding: CodePage | str, errors: str = "replace", replace: str = "?") -> bytes:
        """
        Transcode ``text`` for the printer.

        ``encoding`` is a Python codec name or a ``CodePage`` from the table.
        """
        codec = encoding.codec if isinstance(encoding, CodePage) else encoding
        return encode(text, codec, errors=errors, replace=replace)

    def raw(self, values: Iterable[int]) -> bytes:
        """Encode arbitrary byte values, for commands the table does not name."""
        return sequence(values)

    # ---- aliases ----
    text = plain_text
    quad_text = quad_size
    big = quad_size
    title = quad_size
    header = quad_size
    double_width_double_height = quad_size
    double_height_double_width = quad_size
    u = underline
    u2 = underline2
    b = bold
    invert = inverted
    black = color_black
    default_color = color_black
    black_color = color_black
    red = color_red
    alt_color = color_red
    alternative_color = color_red
    red_color = color_red
    cut = full_cut
    set_encoding = encoding
    set_printer_encoding = encoding
    send_data_escpos = raw


@lru_cache
def default_builder() -> SequenceBuilder:
    """Return a builder over the packaged command table."""
    return SequenceBuilder(default_table())
