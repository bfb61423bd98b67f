"""
ESC/POS command sequence builder.

``SequenceBuilder`` exposes one method per printer feature (text style,
alignment, color, barcode, PDF417, cut, drawer kick, code page selection).
"""
from escposkit.builder.helpers import SequenceBuilder, default_builder
from escposkit.builder.options import (
    Alignment,
    BarcodeFormat,
    BarcodeSpec,
    Color,
    TextPosition,
)
from escposkit.builder.pdf417 import pad_pdf417_data, pdf417_length_prefix

__all__ = [
    "Alignment",
    "BarcodeFormat",
    "BarcodeSpec",
    "Color",
    "SequenceBuilder",
    "TextPosition",
    "default_builder",
    "pad_pdf417_data",
    "pdf417_length_prefix",
]
