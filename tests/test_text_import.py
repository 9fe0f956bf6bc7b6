"""Tests for importing student text files into the assessor."""

import asyncio

import pytest

from socrates.widgets.guided import GuidedPromptWidget, TextImportError, decode_text, import_text_file
from socrates.widgets.makers import LESSON_PLANNER, STUDENT_TEXT_ASSESSOR


class _FakeUpload:
    def __init__(self, data: bytes, delay: float = 0.0):
        self._data = data
        self._delay = delay

    async def read(self) -> bytes:
        if self._delay:
            await asyncio.sleep(self._delay)
        return self._data


def _assessor():
    return GuidedPromptWidget(STUDENT_TEXT_ASSESSOR, "s1", lambda _p: None, lambda _m: None)


def test_import_replaces_text_wholesale():
    widget = _assessor()
    widget.state.set_field("text", "old draft")

    content = asyncio.run(widget.import_text_file(_FakeUpload("Min sommar var lång.".encode("utf-8"))))

    assert content == "Min sommar var lång."
    assert widget.state.fields["text"] == "Min sommar var lång."


def test_import_reads_path_and_strips_bom(tmp_path):
    path = tmp_path / "elevtext.txt"
    path.write_bytes(b"\xef\xbb\xbf" + "Hej världen".encode("utf-8"))
    widget = _assessor()

    asyncio.run(widget.import_text_file(path))

    assert widget.state.fields["text"] == "Hej världen"


def test_missing_path_raises_import_error(tmp_path):
    widget = _assessor()
    with pytest.raises(TextImportError):
        asyncio.run(widget.import_text_file(tmp_path / "missing.txt"))


def test_binary_file_is_rejected_and_field_left_unchanged():
    widget = _assessor()
    widget.state.set_field("text", "keep me")

    with pytest.raises(TextImportError):
        asyncio.run(widget.import_text_file(_FakeUpload(b"PK\x03\x04\x00\x00binary")))

    assert widget.state.fields["text"] == "keep me"


def test_invalid_utf8_is_rejected():
    with pytest.raises(TextImportError):
        decode_text(b"\xff\xfe\xfa")


def test_widget_without_upload_field_rejects_import():
    state = LESSON_PLANNER.new_state()
    with pytest.raises(TextImportError):
        asyncio.run(import_text_file(LESSON_PLANNER, state, b"text"))


def test_last_resolved_import_wins():
    widget = _assessor()

    async def _both():
        await asyncio.gather(
            widget.import_text_file(_FakeUpload(b"slow", delay=0.05)),
            widget.import_text_file(_FakeUpload(b"fast")),
        )

    asyncio.run(_both())
    assert widget.state.fields["text"] == "slow"


def test_imported_text_is_used_by_dispatch():
    sent = []
    widget = GuidedPromptWidget(STUDENT_TEXT_ASSESSOR, "s1", lambda _p: None, sent.append)
    asyncio.run(widget.import_text_file(b"Jag gillar fotboll."))

    widget.dispatch("analysis")

    assert '"Jag gillar fotboll."' in sent[0].text
    assert "[Ingen text angiven]" not in sent[0].text
