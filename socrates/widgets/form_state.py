"""Mutable per-widget form state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class FormState:
    """Selected subject/grade codes plus the widget's free-text fields.

    An empty string means the user has not filled the value in yet.
    """

    subject: str = ""
    grade: str = ""
    fields: dict[str, str] = field(default_factory=dict)

    @classmethod
    def blank(cls, field_names: Iterable[str]) -> "FormState":
        return cls(fields={name: "" for name in field_names})

    def select_subject(self, code: str) -> None:
        self.subject = code

    def select_grade(self, code: str) -> None:
        self.grade = code

    def set_field(self, name: str, value: str) -> None:
        if name not in self.fields:
            raise KeyError(name)
        self.fields[name] = value
