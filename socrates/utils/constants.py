"""Shared tokens and magic values used across widgets and prompts."""

# Placeholder tokens substituted for unfilled form fields. They are read by the
# model as instructions to ask the teacher for the missing value.
SUBJECT_PLACEHOLDER = "[ämne]"
GRADE_PLACEHOLDER = "[årskurs]"
TOPIC_PLACEHOLDER = "[ämne/tema]"
ASSIGNMENT_PLACEHOLDER = "[uppgift]"
TEXT_PLACEHOLDER = "[Ingen text angiven]"

# Model selection id that must not receive document-creation instructions.
REASONING_MODEL_ID = "chat-model-reasoning"

# Canonical chat route; formatted with the session id.
CHAT_ROUTE = "/chat/{session_id}"

# Fallback for location hints the client did not supply.
UNKNOWN_LOCATION = "okänd"

# Longest chat title kept on a session.
MAX_TITLE_CHARS = 60
