"""
Character code page helpers.

Printers render 8-bit text in whichever code page was last selected with
``CP_SET``. ``encode`` converts Python text into such a code page; selecting
the page on the printer is done with ``SequenceBuilder.encoding``.
"""
from __future__ import annotations

from escposkit.errors import InvalidArgument
from escposkit.table import CodePage, CommandTable


def encode(text: str, encoding: str, errors: str = "replace", replace: str = "?") -> bytes:
    """
    Transcode text into a printer encoding.

    Args:
        text: The text to convert.
        encoding: A Python codec name (e.g. ``"cp437"``).
        errors: ``"replace"`` substitutes ``replace`` for every character the
            codec cannot map; any other value is handed to ``str.encode``.
        replace: The substitute character used with ``errors="replace"``.

    Returns:
        The encoded bytes.
    """
    if errors != "replace":
        return text.encode(encoding, errors)

    substitute = encode_replacement(replace, encoding)
    out = bytearray()
    rest = text
    while rest:
        try:
            out += rest.encode(encoding)
            break
        except UnicodeEncodeError as exc:
            out += rest[:exc.start].encode(encoding)
            out += substitute * (exc.end - exc.start)
            rest = rest[exc.end:]
    return bytes(out)


def encode_replacement(replace: str, encoding: str) -> bytes:
    """
    Encode the substitute character for ``encoding``.

    Raises:
        InvalidArgument: If the codec cannot represent ``replace``.
    """
    try:
        return replace.encode(encoding)
    except UnicodeEncodeError as exc:
        raise InvalidArgument(
            "replace", replace, f"Replacement {replace!r} cannot be encoded as {encoding}."
        ) from exc


def resolve_code_page(table: CommandTable, code_page: CodePage | str) -> CodePage:
    """
    Look up a code page by name.

    Raises:
        InvalidArgument: If the table has no page with that name.
    """
    if isinstance(code_page, CodePage):
        return code_page
    found = table.code_page(code_page) if isinstance(code_page, str) else None
    if found is None:
        raise InvalidArgument(
            "code_page",
            code_page,
            f"Unknown code page {code_page!r}. Available: {sorted(table.code_pages)}",
        )
    return found


def code_page_number(table: CommandTable, code_page: CodePage | str | int) -> int:
    """Return the byte that selects ``code_page``; raw page numbers pass through."""
    if isinstance(code_page, int) and not isinstance(code_page, bool):
        if code_page < 0 or code_page > 255:
            raise InvalidArgument("code_page", code_page, "Code page must be in range from 0 to 255.")
        return code_page
    return resolve_code_page(table, code_page).code
