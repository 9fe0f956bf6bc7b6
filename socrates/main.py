"""FastAPI application serving the guided-prompt widgets and chat sessions."""

import concurrent.futures
import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import FastAPI, HTTPException, UploadFile

from socrates.chat.channel import InferenceChannel
from socrates.chat.documents import create_document, revise_document
from socrates.chat.session import ChatSession, SessionStore
from socrates.chat.system_prompt import compose_system_prompt
from socrates.chat.titles import generate_title
from socrates.config import settings
from socrates.schemas.chat import ChatSessionView, OutboundMessage, SessionCreated
from socrates.schemas.documents import DocumentCreateRequest, DocumentResponse, DocumentReviseRequest
from socrates.schemas.hints import SystemPromptConfig, SystemPromptRequest, SystemPromptResponse
from socrates.schemas.widgets import (
    ActionView,
    CatalogEntryView,
    DispatchRequest,
    DispatchResponse,
    FieldView,
    FormStateView,
    FormUpdate,
    WidgetView,
)
from socrates.widgets.form_state import FormState
from socrates.widgets.guided import GuidedPromptWidget, TextImportError, WidgetConfig, import_text_file
from socrates.widgets.makers import WIDGETS, get_widget_config

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="Socrates", version="0.1.0")

sessions = SessionStore()


def _now() -> datetime:
    return datetime.now(ZoneInfo(settings.timezone))


def _widget_or_404(kind: str) -> WidgetConfig:
    config = get_widget_config(kind)
    if config is None:
        raise HTTPException(status_code=404, detail=f"Unknown widget: {kind}")
    return config


def _session_or_404(session_id: str) -> ChatSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return session


def _widget_view(config: WidgetConfig) -> WidgetView:
    return WidgetView(
        kind=config.kind,
        title=config.title,
        subtitle=config.subtitle,
        subjects=[CatalogEntryView(code=e.code, label=e.label) for e in config.subjects],
        grades=[CatalogEntryView(code=e.code, label=e.label) for e in config.grades],
        fields=[FieldView(name=f.name, label=f.label, placeholder=f.placeholder) for f in config.fields],
        actions=[ActionView(id=a.id, label=a.label, icon=a.icon) for a in config.actions],
        accepts_upload=config.upload_field is not None,
    )


def _form_view(state: FormState) -> FormStateView:
    return FormStateView(subject=state.subject, grade=state.grade, fields=dict(state.fields))


def _system_prompt(selected_model: str, request: DispatchRequest | SystemPromptRequest) -> str:
    return compose_system_prompt(
        SystemPromptConfig(selected_model=selected_model, request_hints=request.hints, now=_now())
    )


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/widgets", response_model=list[WidgetView])
def list_widgets():
    return [_widget_view(config) for config in WIDGETS.values()]


@app.post("/sessions", response_model=SessionCreated)
def create_session():
    session = sessions.create()
    logger.info("Session created: %s", session.id)
    return SessionCreated(session_id=session.id)


@app.get("/chat/{session_id}", response_model=ChatSessionView)
def get_chat(session_id: str):
    return _session_or_404(session_id).view()


@app.get("/sessions/{session_id}/widgets/{kind}", response_model=FormStateView)
def get_form(session_id: str, kind: str):
    config = _widget_or_404(kind)
    session = sessions.get(session_id)
    if session is None or kind not in session.forms:
        return _form_view(config.new_state())
    return _form_view(session.forms[kind])


@app.put("/sessions/{session_id}/widgets/{kind}/form", response_model=FormStateView)
def update_form(session_id: str, kind: str, update: FormUpdate):
    """Apply selector and text-input changes to the mounted widget."""
    config = _widget_or_404(kind)
    state = sessions.get_or_create(session_id).form_for(config)
    unknown = sorted(set(update.fields) - set(config.field_names()))
    if unknown:
        raise HTTPException(status_code=422, detail=f"Unknown fields for {kind}: {', '.join(unknown)}")
    if update.subject is not None:
        state.select_subject(update.subject)
    if update.grade is not None:
        state.select_grade(update.grade)
    for name, value in update.fields.items():
        state.set_field(name, value)
    return _form_view(state)


@app.delete("/sessions/{session_id}/widgets/{kind}", response_model=FormStateView)
def remount_widget(session_id: str, kind: str):
    """Reset the widget's form state, as a fresh mount would."""
    config = _widget_or_404(kind)
    session = sessions.get_or_create(session_id)
    session.unmount(kind)
    return _form_view(session.form_for(config))


@app.post("/sessions/{session_id}/widgets/{kind}/import", response_model=FormStateView)
async def import_student_text(session_id: str, kind: str, file: UploadFile):
    """Replace the widget's student text with the content of an uploaded file."""
    config = _widget_or_404(kind)
    if config.upload_field is None:
        raise HTTPException(status_code=400, detail=f"{kind} does not accept file uploads")
    state = sessions.get_or_create(session_id).form_for(config)

    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Filen är för stor")
    try:
        await import_text_file(config, state, raw)
    except TextImportError as exc:
        logger.warning("Rejected upload %r for %s: %s", file.filename, kind, exc)
        raise HTTPException(
            status_code=422,
            detail="Filen kunde inte läsas som text. Klistra in elevtexten i stället.",
        ) from exc
    return _form_view(state)


@app.post("/sessions/{session_id}/widgets/{kind}/actions/{action_id}", response_model=DispatchResponse)
def dispatch_action(session_id: str, kind: str, action_id: str, request: DispatchRequest | None = None):
    """Handle an action button click.

    Builds the prompt from the stored form state and forwards it, headed by
    the composed system prompt, to the chat model. Unknown action ids are
    ignored and reported as ``dispatched: false``. The turn and the title
    request run under the session lock and share ``chat_timeout_seconds``.
    """
    request = request or DispatchRequest()
    config = _widget_or_404(kind)
    session = sessions.get_or_create(session_id)
    selected_model = request.selected_model or settings.default_chat_model
    channel = InferenceChannel(session, _system_prompt(selected_model, request), selected_model)

    sent: list[OutboundMessage] = []

    def send_message(message: OutboundMessage) -> None:
        sent.append(message)
        channel(message)

    widget = GuidedPromptWidget(config, session.id, session.navigate, send_message, state=session.form_for(config))

    def run_turn() -> DispatchResponse:
        with session.lock:
            if channel.abandoned.is_set():
                return DispatchResponse(session_id=session.id, dispatched=False)
            widget.dispatch(action_id)
            if sent and session.title is None and settings.generate_titles and not channel.abandoned.is_set():
                try:
                    session.title = generate_title(sent[0].text, selected_model=selected_model) or None
                except Exception:
                    logger.warning("Title generation failed for session %s", session.id, exc_info=True)
            return DispatchResponse(
                session_id=session.id,
                dispatched=bool(sent),
                location=session.location,
                title=session.title,
                messages=list(session.messages),
            )

    logger.info("Dispatch started: %s/%s", kind, action_id)
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(run_turn)
        done, _ = concurrent.futures.wait([future], timeout=settings.chat_timeout_seconds)
        if not done:
            channel.abandoned.set()
            logger.error("Dispatch timed out")
            raise HTTPException(status_code=504, detail="Chat processing timed out")
        response = future.result()
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Chat model call failed")
        raise HTTPException(status_code=502, detail=f"Chat model error: {exc}") from exc
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    logger.info("Dispatch finished: %s/%s sent=%d", kind, action_id, len(sent))
    return response


@app.post("/system-prompt", response_model=SystemPromptResponse)
def system_prompt(request: SystemPromptRequest):
    selected_model = request.selected_model or settings.default_chat_model
    return SystemPromptResponse(prompt=_system_prompt(selected_model, request))


@app.post("/documents", response_model=DocumentResponse)
def documents_create(request: DocumentCreateRequest):
    try:
        return create_document(request)
    except Exception as exc:
        logger.exception("Document creation failed")
        raise HTTPException(status_code=502, detail=f"Chat model error: {exc}") from exc


@app.post("/documents/revise", response_model=DocumentResponse)
def documents_revise(request: DocumentReviseRequest):
    try:
        return revise_document(request)
    except Exception as exc:
        logger.exception("Document revision failed")
        raise HTTPException(status_code=502, detail=f"Chat model error: {exc}") from exc
