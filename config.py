"""Wenzhai configuration — loaded from environment / .env file."""

from __future__ import annotations

from typing import Protocol

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- DeepSeek -------------------------------------------------------
    deepseek_api_key: str = ""
    deepseek_base_url: str = "https://api.deepseek.com"
    deepseek_model: str = "deepseek-chat"

    # --- Summaries ------------------------------------------------------
    summary_language: str = "中文"
    summary_min_length: int = 200
    max_retries: int = 3
    retry_delay: float = 1.0  # seconds, multiplied by the attempt number

    # --- Server ---------------------------------------------------------
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    # --- Integration with the publishing pipeline -----------------------
    internal_token: str = ""  # shared secret between the pipeline and this service
    allowed_origins: str = "*"  # comma-separated origins


class ConfigStore(Protocol):
    """Async key/value lookup the summarizer reads its credentials from."""

    async def get(self, key: str) -> str | None: ...


class SettingsConfigStore:
    """Expose a :class:`Settings` instance through the ``ConfigStore`` protocol.

    Keys are matched case-insensitively against the settings fields, so
    ``"DEEPSEEK_API_KEY"`` resolves to ``settings.deepseek_api_key``.
    Unknown keys and empty values both read as ``None``.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def get(self, key: str) -> str | None:
        value = getattr(self._settings, key.lower(), None)
        if value is None or value == "":
            return None
        return str(value)


settings = Settings()
