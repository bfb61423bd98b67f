"""
Immutable ESC/POS command table.

The table maps symbolic command names (``TXT_BOLD_ON``, ``BARCODE_EAN13``...)
to the raw byte sequences defined by the Epson ESC/POS reference, plus the
catalog of character code pages selectable with ``CP_SET``. The packaged
table ships as ``escposkit/resources/command_table.json``; a custom table with
the same layout can be loaded from disk.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from escposkit.core.binary import sequence
from escposkit.errors import CommandTableError, CommandTableNotFoundError
from escposkit.resources import load_table_data

# Every command the builder looks up; a table lacking one is rejected at load time.
REQUIRED_COMMANDS: frozenset[str] = frozenset({
    "TXT_NORMAL", "TXT_2HEIGHT", "TXT_2WIDTH", "TXT_4SQUARE",
    "TXT_UNDERL_OFF", "TXT_UNDERL_ON", "TXT_UNDERL2_ON",
    "TXT_BOLD_OFF", "TXT_BOLD_ON",
    "TXT_INVERT_OFF", "TXT_INVERT_ON",
    "TXT_ALIGN_LT", "TXT_ALIGN_CT", "TXT_ALIGN_RT",
    "TXT_COLOR_BLACK", "TXT_COLOR_RED",
    "BARCODE_TXT_OFF", "BARCODE_TXT_ABV", "BARCODE_TXT_BLW", "BARCODE_TXT_BTH",
    "BARCODE_HEIGHT", "BARCODE_WIDTH",
    "BARCODE_UPC_A", "BARCODE_UPC_E", "BARCODE_EAN13", "BARCODE_EAN8",
    "BARCODE_CODE39", "BARCODE_ITF", "BARCODE_NW7",
    "BARCODE_PDF417",
    "PAPER_FULL_CUT", "PAPER_PARTIAL_CUT",
    "CD_KICK_2", "CD_KICK_5",
    "CP_SET",
})


@dataclass(frozen=True)
class CodePage:
    """
    A printer character code page.

    Attributes:
        name: Table name, e.g. ``"CP437"``.
        codec: Python codec used to transcode text for this page.
        code: The byte sent after ``CP_SET`` to select the page.
    """
    name: str
    codec: str
    code: int


def _to_bytes(name: str, values: Any) -> bytes:
    if not isinstance(values, list) or not all(isinstance(v, int) for v in values):
        raise CommandTableError(f"Command '{name}' must be a list of integers, got {values!r}")
    try:
        return sequence(values)
    except ValueError as exc:
        raise CommandTableError(f"Command '{name}' has a byte value outside 0-255: {values!r}") from exc


def _to_code_page(name: str, entry: Any) -> CodePage:
    if not isinstance(entry, dict) or "codec" not in entry or "code" not in entry:
        raise CommandTableError(f"Code page '{name}' must define 'codec' and 'code'")
    code = entry["code"]
    if not isinstance(code, int) or code < 0 or code > 255:
        raise CommandTableError(f"Code page '{name}' has an invalid code: {code!r}")
    return CodePage(name=name, codec=str(entry["codec"]), code=code)


class CommandTable(Mapping[str, bytes]):
    """
    Read-only mapping of command name to byte sequence.

    Instances are immutable once built and safe to share between builders and
    threads.
    """

    def __init__(self, commands: Mapping[str, bytes], code_pages: Optional[Mapping[str, CodePage]] = None) -> None:
        missing = sorted(REQUIRED_COMMANDS - set(commands))
        if missing:
            raise CommandTableError(f"Command table is missing required commands: {missing}")
        self._commands: Mapping[str, bytes] = MappingProxyType(dict(commands))
        self._code_pages: Mapping[str, CodePage] = MappingProxyType(dict(code_pages or {}))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommandTable":
        """
        Build a table from the JSON layout used by ``command_table.json``.

        Args:
            data: A dict with a ``"commands"`` mapping and an optional
                ``"code_pages"`` mapping.

        Returns:
            The validated ``CommandTable``.
        """
        raw_commands = data.get("commands")
        if not isinstance(raw_commands, dict):
            raise CommandTableError("Command table requires a 'commands' mapping")
        commands = {name: _to_bytes(name, values) for name, values in raw_commands.items()}
        code_pages = {
            name.upper(): _to_code_page(name.upper(), entry)
            for name, entry in (data.get("code_pages") or {}).items()
        }
        return cls(commands, code_pages)

    @property
    def code_pages(self) -> Mapping[str, CodePage]:
        return self._code_pages

    def code_page(self, name: str) -> Optional[CodePage]:
        return self._code_pages.get(name.strip().upper())

    def __getitem__(self, name: str) -> bytes:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandTable({len(self._commands)} commands, {len(self._code_pages)} code pages)"


@lru_cache
def default_table() -> CommandTable:
    """Return the packaged command table (loaded once)."""
    return CommandTable.from_dict(load_table_data())


def load_command_table(path: Optional[str | Path] = None) -> CommandTable:
    """
    Load a command table.

    Args:
        path: Optional path to a JSON file with the ``command_table.json``
            layout. When omitted the packaged table is returned.

    Returns:
        A ``CommandTable``.
    """
    if path is None:
        return default_table()
    table_path = Path(path)
    if not table_path.is_file():
        raise CommandTableNotFoundError(f"Command table '{table_path}' not found.")
    with open(table_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise CommandTableError(f"Command table '{table_path}' is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise CommandTableError(f"Command table '{table_path}' must contain a JSON object")
    return CommandTable.from_dict(data)
