"""Request and response schemas for the widget endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from socrates.schemas.chat import ChatMessage
from socrates.schemas.hints import RequestHints


class CatalogEntryView(BaseModel):
    code: str
    label: str


class ActionView(BaseModel):
    id: str
    label: str
    icon: str


class FieldView(BaseModel):
    name: str
    label: str
    placeholder: str


class WidgetView(BaseModel):
    """Everything a client needs to render one guided-prompt widget."""

    kind: str
    title: str
    subtitle: str
    subjects: list[CatalogEntryView]
    grades: list[CatalogEntryView]
    fields: list[FieldView]
    actions: list[ActionView]
    accepts_upload: bool = False


class FormStateView(BaseModel):
    subject: str = ""
    grade: str = ""
    fields: dict[str, str] = Field(default_factory=dict)


class FormUpdate(BaseModel):
    """Partial form update; omitted values are left untouched."""

    subject: str | None = None
    grade: str | None = None
    fields: dict[str, str] = Field(default_factory=dict)


class DispatchRequest(BaseModel):
    selected_model: str | None = None
    hints: RequestHints = RequestHints()


class DispatchResponse(BaseModel):
    session_id: str
    dispatched: bool
    location: str | None = None
    title: str | None = None
    messages: list[ChatMessage] = Field(default_factory=list)
