"""Per-request context used when composing the system prompt."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from socrates.utils.constants import REASONING_MODEL_ID


class RequestHints(BaseModel):
    """Geolocation and clock hints sent with a chat request.

    All fields are optional; the client may not know its location and may
    leave ``client_local_time`` empty, in which case the server clock is used.
    """

    latitude: float | None = None
    longitude: float | None = None
    city: str | None = None
    country: str | None = None
    client_local_time: str | None = None


class SystemPromptConfig(BaseModel):
    """Explicit inputs of ``compose_system_prompt``."""

    model_config = ConfigDict(frozen=True)

    selected_model: str
    request_hints: RequestHints = RequestHints()
    now: datetime
    reasoning_model_id: str = REASONING_MODEL_ID


class SystemPromptRequest(BaseModel):
    selected_model: str | None = None
    hints: RequestHints = RequestHints()


class SystemPromptResponse(BaseModel):
    prompt: str
