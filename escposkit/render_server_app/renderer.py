"""
Turns a list of render segments into one command sequence.

Each segment names a ``SequenceBuilder`` operation. Text content is transcoded
into the request's code page first. All segments are rendered before anything
is returned, so a rejected segment never yields partial output.
"""
from __future__ import annotations

from typing import Callable, Dict

from escposkit.builder import SequenceBuilder
from escposkit.encoding import encode, resolve_code_page
from escposkit.errors import InvalidArgument
from escposkit.render_server_app.models import RenderRequest, Segment
from escposkit.table import CodePage

# Operations that wrap text content.
CONTENT_OPS: frozenset[str] = frozenset({
    "plain_text", "text", "double_height", "double_width", "quad_size",
    "underline", "underline2", "bold", "inverted",
})
# Wrappers that also accept a restore target.
RESTORE_OPS: frozenset[str] = frozenset({
    "left", "right", "center", "color_black", "color_red",
})
NO_ARG_OPS: frozenset[str] = frozenset({
    "align_left", "align_right", "align_center",
    "partial_cut", "full_cut", "cut", "open_cash_drawer",
})


def _render_segment(builder: SequenceBuilder, segment: Segment, to_bytes: Callable[[str], bytes]) -> bytes:
    op = segment.op.strip().lower()
    if op in CONTENT_OPS:
        return getattr(builder, op)(to_bytes(segment.content))
    if op in RESTORE_OPS:
        kwargs: Dict[str, str] = {"restore": segment.restore} if segment.restore else {}
        return getattr(builder, op)(to_bytes(segment.content), **kwargs)
    if op in NO_ARG_OPS:
        return getattr(builder, op)()
    if op == "barcode":
        options = {
            key: value
            for key, value in (
                ("text_position", segment.text_position),
                ("height", segment.height),
                ("width", segment.width),
                ("format", segment.format),
            )
            if value is not None
        }
        return builder.barcode(to_bytes(segment.content), **options)
    if op == "pdf417":
        return builder.pdf417(to_bytes(segment.content))
    if op == "encoding":
        return builder.encoding(segment.code_page or "")
    if op == "raw":
        try:
            return builder.raw(segment.values)
        except ValueError as exc:
            raise InvalidArgument("values", segment.values, str(exc)) from exc
    raise InvalidArgument("op", segment.op, f"Unsupported operation: {segment.op!r}")


def render(
    builder: SequenceBuilder,
    request: RenderRequest,
    default_code_page: str,
    replacement_char: str = "?",
) -> bytes:
    """
    Render every segment of ``request`` and concatenate the results.

    When the request names a code page, the page-select command is emitted
    first; otherwise text is transcoded with ``default_code_page`` and the
    printer's current page is left alone.

    Raises:
        InvalidArgument: If any segment is rejected.
    """
    page: CodePage = resolve_code_page(builder.table, request.code_page or default_code_page)

    def to_bytes(content: str) -> bytes:
        return encode(content, page.codec, replace=replacement_char)

    parts = [builder.encoding(page)] if request.code_page else []
    parts.extend(_render_segment(builder, segment, to_bytes) for segment in request.segments)
    return b"".join(parts)
