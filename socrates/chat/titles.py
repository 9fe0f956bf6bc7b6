"""Chat title generation."""

from langchain_core.messages import HumanMessage, SystemMessage

from socrates.prompts.persona import TITLE_PROMPT
from socrates.utils.constants import MAX_TITLE_CHARS
from socrates.utils.llm_helpers import invoke_llm


def clean_title(raw: str) -> str:
    title = raw.strip().splitlines()[0] if raw.strip() else ""
    title = title.strip().strip("\"'“”«»").strip()
    return title[:MAX_TITLE_CHARS].rstrip()


def generate_title(text: str, llm=None, selected_model: str | None = None) -> str:
    """Ask the model for a short Swedish title for a conversation opener."""
    raw = invoke_llm(
        [SystemMessage(content=TITLE_PROMPT), HumanMessage(content=text)],
        llm=llm,
        selected_model=selected_model,
    )
    return clean_title(raw)
