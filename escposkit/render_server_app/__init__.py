"""
HTTP front-end for the sequence builder.

The app renders JSON segment lists into raw ESC/POS bytes. It does not talk to
printers; callers forward the response body to their own transport.
"""
from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from escposkit.builder import SequenceBuilder
from escposkit.encoding import encode_replacement, resolve_code_page
from escposkit.errors import InvalidArgument
from escposkit.render_server_app.config import RenderSettings, get_settings
from escposkit.render_server_app.logging import create_logger, json_safe, ring_buffer
from escposkit.render_server_app.models import CodePageInfo, RenderRequest
from escposkit.render_server_app.renderer import render
from escposkit.table import CommandTable, load_command_table

OCTET_STREAM = "application/octet-stream"


def create_app(settings: Optional[RenderSettings] = None, table: Optional[CommandTable] = None) -> FastAPI:
    settings = settings or get_settings()
    table = table or load_command_table(settings.command_table_path)
    # Fail at startup on a default page or substitute the printer cannot use.
    default_page = resolve_code_page(table, settings.default_code_page)
    encode_replacement(settings.replacement_char, default_page.codec)

    builder = SequenceBuilder(table)
    logger = create_logger("escposkit.render_server", settings.log_ring_size)

    app = FastAPI(title="escposkit render server")
    app.state.settings = settings
    app.state.builder = builder
    app.state.logger = logger

    @app.exception_handler(InvalidArgument)
    async def invalid_argument_handler(request: Request, exc: InvalidArgument) -> JSONResponse:
        logger.warning("render_rejected", extra={"field": exc.field, "value": exc.value})
        return JSONResponse(
            status_code=422,
            content={"field": exc.field, "value": json_safe(exc.value), "message": exc.message},
        )

    @app.get("/health", response_class=PlainTextResponse)
    async def health() -> str:
        return "ok"

    @app.get("/code_pages", response_model=List[CodePageInfo])
    async def code_pages() -> List[CodePageInfo]:
        return [
            CodePageInfo(name=page.name, codec=page.codec, code=page.code)
            for page in sorted(table.code_pages.values(), key=lambda p: p.code)
        ]

    @app.get("/logs")
    async def logs() -> dict:
        handler = ring_buffer(logger)
        return {"events": handler.get_events() if handler else []}

    @app.post("/render")
    async def render_job(body: RenderRequest) -> Response:
        payload = render(
            builder,
            body,
            default_code_page=settings.default_code_page,
            replacement_char=settings.replacement_char,
        )
        logger.info(
            "render_ok",
            extra={
                "segments": len(body.segments),
                "bytes": len(payload),
                "code_page": body.code_page or settings.default_code_page,
            },
        )
        return Response(content=payload, media_type=OCTET_STREAM)

    return app


__all__ = ["create_app", "RenderSettings", "get_settings"]
