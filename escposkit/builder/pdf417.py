"""
PDF417 block framing.

Some printer firmware mis-renders a PDF417 block whose length-prefix low byte
(``pL``) is above 120. Payloads that would land there are padded with spaces
up to the next multiple of 256, which brings their low byte back to a value
the firmware handles.
"""
from __future__ import annotations

from escposkit.core.binary import low_high

PDF417_MAX_LOW_BYTE = 120
PDF417_PAD_BYTE = b" "
# Header bytes the firmware counts as part of the payload length.
PDF417_HEADER_LENGTH = 3
PDF417_MODULE_WIDTH = 2
# Largest padded payload whose length prefix fits in pL/pH.
PDF417_MAX_PAYLOAD = 0xFFFF - PDF417_HEADER_LENGTH


def pad_pdf417_data(data: bytes) -> bytes:
    """Right-pad ``data`` with spaces when ``len(data) % 256`` exceeds 120."""
    remainder = len(data) % 256
    if remainder > PDF417_MAX_LOW_BYTE:
        return data.ljust(len(data) + 256 - remainder, PDF417_PAD_BYTE)
    return data


def pdf417_length_prefix(padded: bytes) -> tuple[int, int]:
    """Return ``(pL, pH)`` for an already padded payload."""
    return low_high(len(padded) + PDF417_HEADER_LENGTH)
