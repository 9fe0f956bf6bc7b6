"""System prompt composition."""

from __future__ import annotations

from datetime import datetime

from socrates.prompts.persona import ARTIFACTS_PROMPT, REGULAR_PROMPT, REQUEST_CONTEXT_PROMPT
from socrates.schemas.hints import RequestHints, SystemPromptConfig
from socrates.utils.constants import UNKNOWN_LOCATION


def format_local_date(now: datetime) -> str:
    """Format a date the way Swedish locales print it (YYYY-MM-DD)."""
    return now.strftime("%Y-%m-%d")


def request_prompt_from_hints(hints: RequestHints, now: datetime) -> str:
    """Render the context block; the client clock wins over ``now``."""
    return REQUEST_CONTEXT_PROMPT.format(
        city=hints.city or UNKNOWN_LOCATION,
        country=hints.country or UNKNOWN_LOCATION,
        date=hints.client_local_time or format_local_date(now),
    )


def compose_system_prompt(config: SystemPromptConfig) -> str:
    """Build the system prompt for one chat request.

    Persona and request context are always present. Document-creation
    instructions are appended for every model except the reasoning one.
    """
    base_prompt = REGULAR_PROMPT + "\n\n" + request_prompt_from_hints(config.request_hints, config.now)
    if config.selected_model == config.reasoning_model_id:
        return base_prompt
    return base_prompt + "\n\n" + ARTIFACTS_PROMPT
