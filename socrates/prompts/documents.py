"""Document creation and revision prompt templates."""

TEXT_DOCUMENT_PROMPT = """\
Write a document for a teacher about the given title. Use clear Markdown headings \
and correct Lgr22 terminology (Syfte, Centralt innehåll, Betygskriterier).
"""

UPDATE_TEXT_INSTRUCTION = (
    "Rewrite or modify the text document. "
    "Preserve clear Markdown headings and Lgr22 terminology."
)
UPDATE_CODE_INSTRUCTION = "Refine the Python code. Ensure comments are clear for students."
UPDATE_SHEET_INSTRUCTION = "Update the CSV data. Keep the structure suitable for Excel/Sheets."

UPDATE_DOCUMENT_PROMPT = """\
{instruction}

Current Content:
{current_content}
"""
