"""Generic guided-prompt widget: form state in, one chat message out."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from socrates.schemas.chat import OutboundMessage
from socrates.utils.constants import CHAT_ROUTE, GRADE_PLACEHOLDER, SUBJECT_PLACEHOLDER
from socrates.widgets.catalogs import Catalog, resolve_label
from socrates.widgets.form_state import FormState
from socrates.widgets.registry import ActionRegistry

logger = logging.getLogger(__name__)

Navigate = Callable[[str], None]
SendMessage = Callable[[OutboundMessage], None]


class TextImportError(ValueError):
    """Raised when an uploaded file cannot be used as student text."""


@dataclass(frozen=True)
class FreeTextField:
    name: str
    label: str
    placeholder: str


@dataclass(frozen=True)
class WidgetConfig:
    """Everything that distinguishes one maker widget from another."""

    kind: str
    title: str
    subtitle: str
    subjects: Catalog
    grades: Catalog
    fields: tuple[FreeTextField, ...]
    actions: ActionRegistry
    upload_field: str | None = None

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def new_state(self) -> FormState:
        return FormState.blank(self.field_names())


def chat_path(session_id: str) -> str:
    return CHAT_ROUTE.format(session_id=session_id)


class GuidedPromptWidget:
    """One mounted widget bound to a chat session.

    The widget owns no transport: ``navigate`` and ``send_message`` are the
    collaborators it calls when an action is dispatched.
    """

    def __init__(
        self,
        config: WidgetConfig,
        session_id: str,
        navigate: Navigate,
        send_message: SendMessage,
        state: FormState | None = None,
    ) -> None:
        self.config = config
        self.session_id = session_id
        self.state = state if state is not None else config.new_state()
        self._navigate = navigate
        self._send_message = send_message

    def prompt_values(self) -> dict[str, str]:
        """Resolve labels and substitute placeholders for empty fields."""
        values = {
            "subject": resolve_label(self.config.subjects, self.state.subject) or SUBJECT_PLACEHOLDER,
            "grade": resolve_label(self.config.grades, self.state.grade) or GRADE_PLACEHOLDER,
        }
        for text_field in self.config.fields:
            values[text_field.name] = self.state.fields.get(text_field.name) or text_field.placeholder
        return values

    def dispatch(self, action_id: str) -> None:
        """Build the prompt for ``action_id`` and hand it to the chat.

        Unknown ids are ignored. Missing form values never block dispatch.
        Errors raised by ``send_message`` propagate to the caller.
        """
        action = self.config.actions.resolve(action_id)
        if action is None:
            logger.info("%s: ignoring unknown action %r", self.config.kind, action_id)
            return

        text = action.render(**self.prompt_values())
        logger.info(
            "%s: dispatching action=%s session=%s chars=%d",
            self.config.kind,
            action.id,
            self.session_id,
            len(text),
        )
        self._navigate(chat_path(self.session_id))
        self._send_message(OutboundMessage.from_text(text))

    async def import_text_file(self, source: Any) -> str:
        """Read ``source`` as text and replace the upload field with it."""
        return await import_text_file(self.config, self.state, source)


def decode_text(raw: bytes) -> str:
    """Decode an uploaded file as UTF-8 text, rejecting binary content."""
    if b"\x00" in raw:
        raise TextImportError("The file looks like a binary file, not plain text")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise TextImportError("The file is not valid UTF-8 text") from exc


async def import_text_file(config: WidgetConfig, state: FormState, source: Any) -> str:
    """Read ``source`` as text and replace the widget's upload field with it.

    ``source`` is raw bytes, a ``Path`` (read in a worker thread) or anything
    with an awaitable ``read()`` returning bytes, such as a FastAPI
    ``UploadFile``. The field is replaced only once the read completes; on
    failure it is left unchanged and ``TextImportError`` is raised.
    """
    field_name = config.upload_field
    if field_name is None:
        raise TextImportError(f"{config.kind} does not accept file uploads")

    if isinstance(source, (bytes, bytearray)):
        raw = bytes(source)
    elif isinstance(source, Path):
        try:
            raw = await asyncio.to_thread(source.read_bytes)
        except OSError as exc:
            raise TextImportError(f"Could not read {source.name}") from exc
    else:
        raw = await source.read()

    content = decode_text(raw)
    state.set_field(field_name, content)
    logger.info("%s: imported %d chars into %s", config.kind, len(content), field_name)
    return content
