"""Send-message channel that forwards widget prompts to the chat model."""

from __future__ import annotations

import logging
import threading

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from socrates.chat.session import ChatSession
from socrates.schemas.chat import ChatMessage, OutboundMessage, TextPart
from socrates.utils.llm_helpers import invoke_llm

logger = logging.getLogger("uvicorn.error")


def to_langchain_messages(system_prompt: str, messages: list[ChatMessage]) -> list[BaseMessage]:
    converted: list[BaseMessage] = [SystemMessage(content=system_prompt)]
    for message in messages:
        if message.role == "user":
            converted.append(HumanMessage(content=message.text))
        else:
            converted.append(AIMessage(content=message.text))
    return converted


class InferenceChannel:
    """Append the message to the session and ask the model for a reply.

    Model errors are not caught here; retries and timeouts belong to the
    caller and to the model client. Once ``abandoned`` is set, a late reply
    is dropped instead of being added to the transcript.
    """

    def __init__(self, session: ChatSession, system_prompt: str, selected_model: str, llm=None) -> None:
        self.session = session
        self.system_prompt = system_prompt
        self.selected_model = selected_model
        self._llm = llm
        self.abandoned = threading.Event()

    def __call__(self, message: OutboundMessage) -> None:
        self.session.append(message)
        logger.info("CHANNEL: session=%s model=%s turns=%d", self.session.id, self.selected_model, len(self.session.messages))
        reply = invoke_llm(
            to_langchain_messages(self.system_prompt, self.session.messages),
            llm=self._llm,
            selected_model=self.selected_model,
        )
        if self.abandoned.is_set():
            logger.warning("CHANNEL: dropping late reply for session=%s", self.session.id)
            return
        self.session.append(ChatMessage(role="assistant", parts=[TextPart(text=reply)]))
