from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

import httpx
from pydantic import BaseModel, ConfigDict, Field

from config.settings import WidgetSettings, get_widget_settings
from relay.models import Business
from widget.businesses import BUSINESSES


logger = logging.getLogger("senior_concierge.widget")


class Message(BaseModel):
    """One turn of the conversation, user- or assistant-authored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    is_user: bool = Field(..., alias="isUser")


class WidgetCapabilities(BaseModel):
    status_check: bool = False


class ResponseError(Exception):
    """The relay answered, but not with a usable reply."""


Listener = Callable[[List[Message]], None]


class ChatClient:
    """Message list, loading flag and error banner of the chat widget.

    Each ``submit`` sends exactly one request to the relay. Only the latest
    utterance is sent; the relay keeps no conversation memory.
    """

    def __init__(
        self,
        settings: Optional[WidgetSettings] = None,
        businesses: Optional[Sequence[Business]] = None,
        capabilities: Optional[WidgetCapabilities] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings or get_widget_settings()
        self.businesses: List[Business] = list(BUSINESSES if businesses is None else businesses)
        self.capabilities = capabilities or WidgetCapabilities()
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=self.settings.relay_url)
        self._listeners: List[Listener] = []

        self.messages: List[Message] = []
        self.input_text = ""
        self.is_loading = False
        self.error: Optional[str] = None
        self.scroll_index = -1

    @property
    def is_input_disabled(self) -> bool:
        return self.is_loading

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _append(self, message: Message) -> None:
        self.messages.append(message)
        # keep the newest turn in view
        self.scroll_index = len(self.messages) - 1
        for listener in self._listeners:
            listener(self.messages)

    def submit(self, text: Optional[str] = None) -> None:
        if text is None:
            text = self.input_text
        if not text.strip():
            return

        self._append(Message(text=text, is_user=True))
        self.input_text = ""
        self.is_loading = True
        self.error = None

        try:
            reply = self._send(text)
            self._append(Message(text=reply, is_user=False))
        except (httpx.HTTPError, ResponseError) as exc:
            logger.error("Error sending message: %s", exc)
            reason = str(exc) or "Unknown error"
            self.error = f"Unable to get a response: {reason}. Please try again later."
        finally:
            self.is_loading = False

    def _send(self, text: str) -> str:
        body = {
            "userInput": text,
            "businesses": [b.model_dump() for b in self.businesses],
        }
        response = self._http.post(self.settings.chat_path, json=body)

        if not response.is_success:
            raise ResponseError(f"HTTP error! status: {response.status_code}")

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise ResponseError("Received non-JSON response from server")

        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseError("Invalid response from server") from exc

        reply = data.get("text") if isinstance(data, dict) else None
        if not isinstance(reply, str) or not reply:
            raise ResponseError("Invalid response from server")
        return reply

    def check_status(self) -> bool:
        if not self.capabilities.status_check:
            raise RuntimeError("status_check capability is not enabled for this widget")

        try:
            response = self._http.get(self.settings.health_path)
        except httpx.HTTPError as exc:
            logger.warning("Relay status check failed: %s", exc)
            return False

        if response.status_code != 200:
            return False
        try:
            return response.json() == {"status": "OK"}
        except ValueError:
            return False

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
