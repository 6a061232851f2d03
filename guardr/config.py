from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from guardr.messages import DEFAULT_MESSAGE_PROVIDER, MessageProvider


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GUARDR_", env_file=".env", extra="ignore")

    # Labels
    DEFAULT_LABEL: str = Field(default="value", min_length=1)
    CAPTURE_LABELS: bool = True  # Derive labels from the call-site argument expression

    # Logging
    LOG_VIOLATIONS: bool = False  # Emit a debug event for every failed check
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True, slots=True)
class GuardConfig:
    """Collaborators and switches injected into a Guard and every clause it builds."""
    message_provider: MessageProvider = field(default=DEFAULT_MESSAGE_PROVIDER)
    default_label: str = "value"
    capture_labels: bool = True
    log_violations: bool = False

    def __post_init__(self):
        if not self.default_label:
            raise ValueError("default_label must be a non-empty string")

    @classmethod
    def from_settings(cls, settings: Settings | None = None, *,
                      message_provider: MessageProvider = DEFAULT_MESSAGE_PROVIDER) -> GuardConfig:
        settings = settings or get_settings()
        return cls(message_provider=message_provider, default_label=settings.DEFAULT_LABEL,
            capture_labels=settings.CAPTURE_LABELS, log_violations=settings.LOG_VIOLATIONS)
