"""Factory for the Ollama-backed chat model."""

from langchain_ollama import ChatOllama

from socrates.config import settings
from socrates.utils.constants import REASONING_MODEL_ID


def resolve_model_name(selected_model: str | None = None) -> str:
    """Map an opaque model-selection id to an Ollama model name."""
    if selected_model == REASONING_MODEL_ID:
        return settings.ollama_reasoning_model
    return settings.ollama_model


def get_chat_model(selected_model: str | None = None):
    """Return a ChatOllama instance for ``selected_model``.

    Parameters
    ----------
    selected_model : str | None
        Model-selection id sent by the client (``chat-model`` or
        ``chat-model-reasoning``). Unknown ids use the default chat model.

    Returns
    -------
    langchain_ollama.ChatOllama
        A chat model connected to the local Ollama server.
    """
    return ChatOllama(
        base_url=settings.ollama_base_url,
        model=resolve_model_name(selected_model),
        client_kwargs={"timeout": settings.ollama_timeout_seconds},
    )
