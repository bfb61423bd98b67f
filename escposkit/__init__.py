from escposkit.builder import (
    Alignment,
    BarcodeFormat,
    BarcodeSpec,
    Color,
    SequenceBuilder,
    TextPosition,
    default_builder,
)
from escposkit.encoding import encode
from escposkit.errors import CommandTableError, EscposError, InvalidArgument
from escposkit.table import CodePage, CommandTable, load_command_table
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Alignment",
    "BarcodeFormat",
    "BarcodeSpec",
    "CodePage",
    "Color",
    "CommandTable",
    "CommandTableError",
    "EscposError",
    "InvalidArgument",
    "SequenceBuilder",
    "TextPosition",
    "default_builder",
    "encode",
    "load_command_table",
]

try:
    __version__ = version("escposkit")
except PackageNotFoundError:
    __version__ = "0.0.0"
