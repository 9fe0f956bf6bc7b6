"""The three maker widgets, each a ``WidgetConfig``."""

from __future__ import annotations

from socrates.prompts import assessor, flashcards, lesson_planner
from socrates.utils.constants import ASSIGNMENT_PLACEHOLDER, TEXT_PLACEHOLDER, TOPIC_PLACEHOLDER
from socrates.widgets.catalogs import (
    ASSESSOR_SUBJECTS,
    GRADES,
    GRADES_WITH_ADULT_EDUCATION,
    SUBJECTS,
)
from socrates.widgets.guided import FreeTextField, WidgetConfig
from socrates.widgets.registry import ActionDefinition, ActionRegistry

_TOPIC_FIELD = FreeTextField("topic", "Ämne/Tema", TOPIC_PLACEHOLDER)

LESSON_PLANNER = WidgetConfig(
    kind="lesson-planner",
    title="Lektionsplanering",
    subtitle="Välj ämne, årskurs och tema för att komma igång",
    subjects=SUBJECTS,
    grades=GRADES,
    fields=(_TOPIC_FIELD,),
    actions=ActionRegistry(
        [
            ActionDefinition("lesson-plan", "Lektionsplanering", "book-open", lesson_planner.LESSON_PLAN_PROMPT.format),
            ActionDefinition("exercises", "Övningar", "pencil-line", lesson_planner.EXERCISES_PROMPT.format),
            ActionDefinition("assessment", "Bedömning", "clipboard-check", lesson_planner.ASSESSMENT_PROMPT.format),
            ActionDefinition("differentiation", "Differentiering", "target", lesson_planner.DIFFERENTIATION_PROMPT.format),
            ActionDefinition("yearly-plan", "Årsplanering", "calendar", lesson_planner.YEARLY_PLAN_PROMPT.format),
            ActionDefinition("lecture", "Genomgång", "presentation", lesson_planner.LECTURE_PROMPT.format),
        ]
    ),
)

FLASHCARD_MAKER = WidgetConfig(
    kind="flashcard-maker",
    title="Skapa Flashcards",
    subtitle="Välj ämne, årskurs och tema för att generera studiematerial",
    subjects=SUBJECTS,
    grades=GRADES_WITH_ADULT_EDUCATION,
    fields=(_TOPIC_FIELD,),
    actions=ActionRegistry(
        [
            ActionDefinition("concepts", "Begrepp", "list", flashcards.CONCEPTS_PROMPT.format),
            ActionDefinition("qa", "Frågor & Svar", "help-circle", flashcards.QA_PROMPT.format),
            ActionDefinition("true-false", "Sant/Falskt", "check-circle", flashcards.TRUE_FALSE_PROMPT.format),
            ActionDefinition("fill-blank", "Fyll i luckor", "file-question", flashcards.FILL_BLANK_PROMPT.format),
        ]
    ),
)

STUDENT_TEXT_ASSESSOR = WidgetConfig(
    kind="student-text-assessor",
    title="Bedöm elevtext",
    subtitle="Ladda upp eller klistra in en elevtext för analys och bedömning",
    subjects=ASSESSOR_SUBJECTS,
    grades=GRADES_WITH_ADULT_EDUCATION,
    fields=(
        FreeTextField("assignment", "Uppgift/Kontext", ASSIGNMENT_PLACEHOLDER),
        FreeTextField("text", "Elevtext", TEXT_PLACEHOLDER),
    ),
    actions=ActionRegistry(
        [
            ActionDefinition("assess", "Bedömning", "scale", assessor.ASSESS_PROMPT.format),
            ActionDefinition("feedback", "Formativ respons", "message-square-plus", assessor.FEEDBACK_PROMPT.format),
            ActionDefinition("analysis", "Språklig analys", "file-text", assessor.ANALYSIS_PROMPT.format),
        ]
    ),
    upload_field="text",
)

WIDGETS: dict[str, WidgetConfig] = {
    config.kind: config for config in (LESSON_PLANNER, FLASHCARD_MAKER, STUDENT_TEXT_ASSESSOR)
}


def get_widget_config(kind: str) -> WidgetConfig | None:
    return WIDGETS.get(kind)
