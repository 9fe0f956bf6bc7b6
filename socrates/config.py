"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # Ollama
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"
    ollama_reasoning_model: str = "qwen3"
    ollama_timeout_seconds: int = 60
    chat_timeout_seconds: int = 90

    # Model selection id used when the client sends none
    default_chat_model: str = "chat-model"

    # Prompt context
    timezone: str = "Europe/Stockholm"
    generate_titles: bool = True

    # Student text uploads
    max_upload_bytes: int = 1_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "SOCRATES_"}


settings = Settings()
