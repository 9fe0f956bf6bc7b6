"""Tests for system prompt composition."""

from datetime import datetime

import pytest

from socrates.chat.system_prompt import compose_system_prompt, request_prompt_from_hints
from socrates.prompts.persona import ARTIFACTS_PROMPT, REGULAR_PROMPT
from socrates.schemas.hints import RequestHints, SystemPromptConfig

NOW = datetime(2026, 10, 19, 9, 30)


def _config(selected_model: str, **hints) -> SystemPromptConfig:
    return SystemPromptConfig(selected_model=selected_model, request_hints=RequestHints(**hints), now=NOW)


def test_reasoning_model_omits_document_instructions():
    prompt = compose_system_prompt(_config("chat-model-reasoning"))
    assert prompt.startswith(REGULAR_PROMPT)
    assert ARTIFACTS_PROMPT not in prompt
    assert "createDocument" not in prompt


@pytest.mark.parametrize("selected_model", ["chat-model", "", "chat-model-reasoning-v2", "anything"])
def test_other_models_always_get_document_instructions(selected_model):
    prompt = compose_system_prompt(_config(selected_model))
    assert prompt.startswith(REGULAR_PROMPT)
    assert prompt.endswith(ARTIFACTS_PROMPT)


def test_context_uses_client_local_time_when_supplied():
    prompt = compose_system_prompt(
        _config("chat-model", city="Uppsala", country="SE", client_local_time="2026-01-07 08:15")
    )
    assert "- Location: Uppsala, SE" in prompt
    assert "- Current Date: 2026-01-07 08:15" in prompt


def test_context_falls_back_to_server_date():
    block = request_prompt_from_hints(RequestHints(city="Malmö", country="SE"), NOW)
    assert "- Current Date: 2026-10-19 " in block


def test_missing_location_renders_unknown():
    block = request_prompt_from_hints(RequestHints(), NOW)
    assert "- Location: okänd, okänd" in block


def test_composition_is_deterministic():
    config = _config("chat-model", city="Lund", country="SE")
    assert compose_system_prompt(config) == compose_system_prompt(config)
