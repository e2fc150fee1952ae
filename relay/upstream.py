from __future__ import annotations

from typing import Any, Dict, List

import httpx

from config.settings import Settings
from relay.errors import ConfigurationError, MalformedResponseError, UpstreamError
from relay.models import Business
from relay.prompt import build_system_prompt


UNEXPECTED_RESPONSE = "Unexpected response from Anthropic API"


def _clean(text: str) -> str:
    return " ".join(str(text).split())


def require_api_key(settings: Settings) -> str:
    if not settings.anthropic_api_key:
        raise ConfigurationError("Anthropic API key is not set")
    return settings.anthropic_api_key


def build_payload(settings: Settings, user_input: str, businesses: List[Business]) -> Dict[str, Any]:
    """Messages API body: system context plus a single user turn.

    Only the latest utterance is sent; earlier turns are not forwarded.
    """
    return {
        "model": settings.anthropic_model,
        "max_tokens": settings.max_tokens,
        "system": build_system_prompt(businesses),
        "messages": [{"role": "user", "content": user_input}],
    }


def call_messages_api(settings: Settings, payload: Dict[str, Any], client: httpx.Client) -> Dict[str, Any]:
    headers = {
        "Content-Type": "application/json",
        "x-api-key": require_api_key(settings),
        "anthropic-version": settings.anthropic_version,
    }

    try:
        response = client.post(
            settings.anthropic_api_url,
            json=payload,
            headers=headers,
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as exc:
        raise UpstreamError(
            _clean(str(exc)),
            status_code=exc.response.status_code,
            body=exc.response.text,
        ) from exc
    except httpx.HTTPError as exc:
        raise UpstreamError(_clean(str(exc)) or type(exc).__name__) from exc
    except httpx.InvalidURL as exc:
        raise UpstreamError(f"Invalid upstream URL: {exc}") from exc
    except UnicodeEncodeError as exc:
        # header values must be ASCII
        raise UpstreamError(f"Invalid request headers: {exc}") from exc
    except ValueError as exc:
        raise UpstreamError(f"Invalid JSON from upstream: {exc}") from exc

    return data


def extract_text(data: Any) -> str:
    content = data.get("content") if isinstance(data, dict) else None
    if not isinstance(content, list) or not content:
        raise MalformedResponseError(UNEXPECTED_RESPONSE)

    first = content[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise MalformedResponseError(UNEXPECTED_RESPONSE)
    return text
