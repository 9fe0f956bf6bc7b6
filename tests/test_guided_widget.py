"""Tests for the generic guided-prompt widget dispatcher."""

import pytest

from socrates.schemas.chat import OutboundMessage
from socrates.widgets.guided import GuidedPromptWidget, chat_path
from socrates.widgets.makers import FLASHCARD_MAKER, LESSON_PLANNER, STUDENT_TEXT_ASSESSOR, WIDGETS


class _Recorder:
    def __init__(self):
        self.events = []

    def navigate(self, path):
        self.events.append(("navigate", path))

    def send(self, message):
        self.events.append(("send", message))

    @property
    def sent(self):
        return [payload for kind, payload in self.events if kind == "send"]


def _widget(config, recorder, session_id="abc123"):
    return GuidedPromptWidget(config, session_id, recorder.navigate, recorder.send)


def test_lesson_plan_end_to_end_resolves_labels_and_navigates_first():
    recorder = _Recorder()
    widget = _widget(LESSON_PLANNER, recorder)
    widget.state.select_subject("matematik")
    widget.state.select_grade("5")
    widget.state.set_field("topic", "Bråk")

    widget.dispatch("lesson-plan")

    assert [kind for kind, _ in recorder.events] == ["navigate", "send"]
    assert recorder.events[0][1] == "/chat/abc123"
    message = recorder.sent[0]
    assert isinstance(message, OutboundMessage)
    assert message.role == "user"
    assert message.parts[0].type == "text"
    text = message.parts[0].text
    assert text.startswith("Skapa en komplett lektionsplanering i Matematik för Årskurs 5 om Bråk.")
    assert "matematik" not in text


def test_empty_form_uses_placeholder_tokens():
    recorder = _Recorder()
    _widget(FLASHCARD_MAKER, recorder).dispatch("qa")

    text = recorder.sent[0].text
    assert "[ämne]" in text
    assert "[årskurs]" in text
    assert "[ämne/tema]" in text


def test_partially_filled_form_mixes_labels_and_placeholders():
    recorder = _Recorder()
    widget = _widget(LESSON_PLANNER, recorder)
    widget.state.select_grade("gymnasiet")

    widget.dispatch("exercises")

    text = recorder.sent[0].text
    assert "[ämne]" in text
    assert "Gymnasiet" in text
    assert "[ämne/tema]" in text


def test_unknown_code_falls_back_to_raw_value():
    recorder = _Recorder()
    widget = _widget(LESSON_PLANNER, recorder)
    widget.state.select_subject("teknik")
    widget.state.select_grade("vux")

    widget.dispatch("lecture")

    assert "i teknik för vux om" in recorder.sent[0].text


def test_assessor_with_empty_text_still_dispatches_placeholder():
    recorder = _Recorder()
    widget = _widget(STUDENT_TEXT_ASSESSOR, recorder)
    widget.state.select_subject("svenska")
    widget.state.select_grade("9")

    widget.dispatch("assess")

    text = recorder.sent[0].text
    assert '"[Ingen text angiven]"' in text
    assert '"[uppgift]"' in text
    assert "Svenska för Årskurs 9" in text


def test_assessor_embeds_assignment_and_student_text():
    recorder = _Recorder()
    widget = _widget(STUDENT_TEXT_ASSESSOR, recorder)
    widget.state.select_subject("svenska-sva")
    widget.state.select_grade("vux")
    widget.state.set_field("assignment", "Skriv en novell")
    widget.state.set_field("text", "Det var en gång en katt.")

    widget.dispatch("feedback")

    text = recorder.sent[0].text
    assert "Svenska som andraspråk för Vuxenutbildning" in text
    assert 'Uppgiften var: "Skriv en novell".' in text
    assert '"Det var en gång en katt."' in text


def test_unknown_action_is_ignored_silently():
    recorder = _Recorder()
    _widget(LESSON_PLANNER, recorder).dispatch("nope")
    assert recorder.events == []


@pytest.mark.parametrize("config", list(WIDGETS.values()), ids=list(WIDGETS))
def test_every_action_sends_exactly_one_non_empty_message(config):
    for action_id in config.actions.ids():
        recorder = _Recorder()
        _widget(config, recorder).dispatch(action_id)
        assert len(recorder.sent) == 1
        text = recorder.sent[0].text
        assert text.strip()
        assert "{" not in text


def test_send_failure_propagates_after_navigation():
    navigated = []

    def _failing_send(_message):
        raise RuntimeError("channel down")

    widget = GuidedPromptWidget(LESSON_PLANNER, "s1", navigated.append, _failing_send)
    with pytest.raises(RuntimeError, match="channel down"):
        widget.dispatch("lesson-plan")
    assert navigated == ["/chat/s1"]


def test_set_field_rejects_unknown_field():
    widget = GuidedPromptWidget(LESSON_PLANNER, "s1", lambda _p: None, lambda _m: None)
    with pytest.raises(KeyError):
        widget.state.set_field("text", "x")


def test_chat_path_uses_session_id():
    assert chat_path("xyz") == "/chat/xyz"
