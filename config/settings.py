from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


def _env_api_key() -> Optional[str]:
    # Older deployments shipped the key under the frontend build prefix.
    return os.getenv("ANTHROPIC_API_KEY") or os.getenv("VITE_ANTHROPIC_API_KEY") or None


class Settings(BaseModel):
    """Relay settings.

    Built once at startup and handed to ``create_app``; handlers never read
    the environment themselves.
    """

    app_env: str = "development"
    anthropic_api_key: Optional[str] = None
    anthropic_api_url: str = ANTHROPIC_MESSAGES_URL
    anthropic_version: str = ANTHROPIC_VERSION
    anthropic_model: str = "claude-3-haiku-20240307"
    max_tokens: int = 1000
    port: int = 3001
    request_timeout: float = 60.0

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            app_env=os.getenv("APP_ENV", "development"),
            anthropic_api_key=_env_api_key(),
            anthropic_api_url=os.getenv("ANTHROPIC_API_URL", ANTHROPIC_MESSAGES_URL),
            port=int(os.getenv("PORT", "3001")),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "60.0")),
        )


class WidgetSettings(BaseModel):
    """Where the chat widget finds the relay."""

    relay_url: str = "http://localhost:3001"
    chat_path: str = "/api/chat"
    health_path: str = "/api/health"

    @classmethod
    def from_env(cls) -> "WidgetSettings":
        return cls(relay_url=os.getenv("CHAT_RELAY_URL", "http://localhost:3001"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_widget_settings() -> WidgetSettings:
    return WidgetSettings.from_env()
