"""Document creation and revision (text, code, sheet)."""

from __future__ import annotations

import logging

from langchain_core.messages import HumanMessage, SystemMessage

from socrates.prompts.documents import (
    TEXT_DOCUMENT_PROMPT,
    UPDATE_CODE_INSTRUCTION,
    UPDATE_DOCUMENT_PROMPT,
    UPDATE_SHEET_INSTRUCTION,
    UPDATE_TEXT_INSTRUCTION,
)
from socrates.prompts.persona import CODE_PROMPT, REGULAR_PROMPT, SHEET_PROMPT
from socrates.schemas.documents import (
    DocumentCreateRequest,
    DocumentKind,
    DocumentResponse,
    DocumentReviseRequest,
)
from socrates.utils.llm_helpers import invoke_llm

logger = logging.getLogger("uvicorn.error")

_CREATE_PROMPTS: dict[str, str] = {
    "text": REGULAR_PROMPT + "\n\n" + TEXT_DOCUMENT_PROMPT,
    "code": CODE_PROMPT,
    "sheet": SHEET_PROMPT,
}

_UPDATE_INSTRUCTIONS: dict[str, str] = {
    "text": UPDATE_TEXT_INSTRUCTION,
    "code": UPDATE_CODE_INSTRUCTION,
    "sheet": UPDATE_SHEET_INSTRUCTION,
}


def update_document_prompt(current_content: str | None, kind: DocumentKind) -> str:
    return UPDATE_DOCUMENT_PROMPT.format(
        instruction=_UPDATE_INSTRUCTIONS[kind],
        current_content=current_content or "",
    )


def create_document(request: DocumentCreateRequest, llm=None) -> DocumentResponse:
    logger.info("DOCUMENT: create kind=%s", request.kind)
    content = invoke_llm(
        [SystemMessage(content=_CREATE_PROMPTS[request.kind]), HumanMessage(content=request.title)],
        llm=llm,
        selected_model=request.selected_model,
    )
    return DocumentResponse(kind=request.kind, content=content)


def revise_document(request: DocumentReviseRequest, llm=None) -> DocumentResponse:
    logger.info("DOCUMENT: revise kind=%s", request.kind)
    content = invoke_llm(
        [
            SystemMessage(content=update_document_prompt(request.content, request.kind)),
            HumanMessage(content=request.description),
        ],
        llm=llm,
        selected_model=request.selected_model,
    )
    return DocumentResponse(kind=request.kind, content=content)
