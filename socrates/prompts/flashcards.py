"""Flashcard maker action prompts."""

CONCEPTS_PROMPT = (
    "Skapa flashcards med viktiga begrepp och förklaringar inom {subject} för {grade} "
    "som handlar om {topic}. Formatet ska vara Begrepp på framsidan och Förklaring på baksidan."
)

QA_PROMPT = (
    "Skapa flashcards med frågor och svar inom {subject} för {grade} som handlar om {topic}. "
    "Formatet ska vara Fråga på framsidan och Svar på baksidan."
)

TRUE_FALSE_PROMPT = (
    "Skapa flashcards med påståenden inom {subject} för {grade} som handlar om {topic}. "
    "Användaren ska avgöra om det är Sant eller Falskt. "
    "Ge rätt svar och en kort förklaring på baksidan."
)

FILL_BLANK_PROMPT = (
    "Skapa flashcards där man ska fylla i luckor i meningar (cloze deletions) inom {subject} "
    "för {grade} som handlar om {topic}. Svaret (det som ska fyllas i) ska stå på baksidan."
)
