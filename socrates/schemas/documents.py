"""Request and response schemas for document generation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

DocumentKind = Literal["text", "code", "sheet"]


class DocumentCreateRequest(BaseModel):
    title: str
    kind: DocumentKind = "text"
    selected_model: str | None = None


class DocumentReviseRequest(BaseModel):
    """Revision of an existing document; ``description`` is the teacher's request."""

    content: str | None = None
    kind: DocumentKind = "text"
    description: str
    selected_model: str | None = None


class DocumentResponse(BaseModel):
    kind: DocumentKind
    content: str
