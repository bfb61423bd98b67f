"""
Command table for ESC/POS printers.

The table is static data: a mapping from symbolic command name to the byte
sequence defined by the ESC/POS reference, plus the selectable code pages.
"""
from escposkit.table.constants import (
    CodePage,
    CommandTable,
    default_table,
    load_command_table,
    REQUIRED_COMMANDS,
)

__all__ = [
    "CodePage",
    "CommandTable",
    "default_table",
    "load_command_table",
    "REQUIRED_COMMANDS",
]
