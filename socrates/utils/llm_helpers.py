"""Shared LLM invocation helper."""

from __future__ import annotations

from typing import Sequence

from langchain_core.messages import BaseMessage

from socrates.llm.ollama_client import get_chat_model


def invoke_llm(prompt: str | Sequence[BaseMessage], llm=None, selected_model: str | None = None) -> str:
    """Invoke the chat model and return the stripped response content string."""
    if llm is None:
        llm = get_chat_model(selected_model)
    response = llm.invoke(prompt)
    return getattr(response, "content", str(response)).strip()
