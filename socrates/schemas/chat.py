"""Chat message schemas shared by the widgets and the session store."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TextPart(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ChatMessage(BaseModel):
    """One transcript entry."""

    role: Literal["user", "assistant"]
    parts: list[TextPart] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(part.text for part in self.parts)


class OutboundMessage(ChatMessage):
    """User message handed to the send-message channel by a widget."""

    role: Literal["user"] = "user"

    @classmethod
    def from_text(cls, text: str) -> "OutboundMessage":
        return cls(parts=[TextPart(text=text)])


class ChatSessionView(BaseModel):
    """Outgoing view of a chat session."""

    session_id: str
    title: str | None = None
    location: str | None = None
    messages: list[ChatMessage] = Field(default_factory=list)


class SessionCreated(BaseModel):
    session_id: str
