"""Lesson planner action prompts.

Formatted with ``subject``, ``grade`` and ``topic``.
"""

LESSON_PLAN_PROMPT = (
    "Skapa en komplett lektionsplanering i {subject} för {grade} om {topic}. "
    "Inkludera syfte, centralt innehåll, kunskapskrav enligt Lgr22, "
    "lektionsstruktur med tidsangivelser, och bedömning."
)

EXERCISES_PROMPT = (
    "Skapa övningar i {subject} för {grade} om {topic}. "
    "Inkludera övningar på olika nivåer för differentiering "
    "(grundläggande, medel, fördjupning)."
)

ASSESSMENT_PROMPT = (
    "Skapa bedömningsunderlag i {subject} för {grade} om {topic}. "
    "Inkludera bedömningsmatris kopplad till kunskapskraven i Lgr22, "
    "samt förslag på formativ och summativ bedömning."
)

DIFFERENTIATION_PROMPT = (
    "Skapa differentierade uppgifter och extra anpassningar i {subject} för {grade} om {topic}. "
    "Inkludera material för elever som behöver extra stöd och extra utmaningar."
)

YEARLY_PLAN_PROMPT = (
    "Skapa en årsplanering i {subject} för {grade} med fokus på {topic}. "
    "Inkludera arbetsområden, tidsfördelning, och koppling till centralt innehåll "
    "och kunskapskrav i Lgr22."
)

LECTURE_PROMPT = (
    "Skapa en strukturerad genomgång/föreläsning i {subject} för {grade} om {topic}. "
    "Inkludera introduktion, huvudmoment, exempel, och sammanfattning."
)
