"""In-memory chat sessions and the widget form state they own."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field

from socrates.schemas.chat import ChatMessage, ChatSessionView
from socrates.widgets.form_state import FormState
from socrates.widgets.guided import WidgetConfig


@dataclass
class ChatSession:
    id: str
    title: str | None = None
    location: str | None = None
    messages: list[ChatMessage] = field(default_factory=list)
    forms: dict[str, FormState] = field(default_factory=dict)
    # Held for a whole dispatch so turns on one session never interleave.
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def navigate(self, path: str) -> None:
        """Record the route the client should show, without reloading."""
        self.location = path

    def append(self, message: ChatMessage) -> None:
        self.messages.append(message)

    def form_for(self, config: WidgetConfig) -> FormState:
        """Return the mounted form state for ``config``, mounting it if needed."""
        state = self.forms.get(config.kind)
        if state is None:
            state = self.forms.setdefault(config.kind, config.new_state())
        return state

    def unmount(self, kind: str) -> None:
        self.forms.pop(kind, None)

    def view(self) -> ChatSessionView:
        return ChatSessionView(
            session_id=self.id,
            title=self.title,
            location=self.location,
            messages=list(self.messages),
        )


class SessionStore:
    """Process-local session registry. Sessions are lost on restart."""

    def __init__(self) -> None:
        self._sessions: dict[str, ChatSession] = {}
        self._lock = threading.Lock()

    def create(self) -> ChatSession:
        session = ChatSession(id=uuid.uuid4().hex)
        with self._lock:
            self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> ChatSession | None:
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: str) -> ChatSession:
        """Return the session, creating it on first use of an unknown id."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = ChatSession(id=session_id)
                self._sessions[session_id] = session
            return session

    def clear(self) -> None:
        self._sessions.clear()
