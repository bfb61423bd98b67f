from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Segment(BaseModel):
    op: str
    content: str = ""
    text_position: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None
    format: Optional[str] = None
    restore: Optional[str] = None
    code_page: Optional[str] = None
    values: List[int] = Field(default_factory=list)


class RenderRequest(BaseModel):
    segments: List[Segment] = Field(default_factory=list)
    code_page: Optional[str] = None


class CodePageInfo(BaseModel):
    name: str
    codec: str
    code: int
