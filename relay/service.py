from __future__ import annotations

import logging

import httpx

from config.settings import Settings
from relay.errors import ConfigurationError, MalformedResponseError, UpstreamError
from relay.models import ChatReply, ChatRequest, FailureKind, RelayFailure, RelayResult
from relay.upstream import build_payload, call_messages_api, extract_text, require_api_key


logger = logging.getLogger("senior_concierge.relay")


def relay_chat(settings: Settings, req: ChatRequest, client: httpx.Client) -> RelayResult:
    """Forward one user turn to the completion API.

    Never raises for expected failures; returns a ``RelayFailure`` instead.
    Nothing is retried.
    """
    try:
        require_api_key(settings)
    except ConfigurationError as exc:
        logger.error("Relay misconfigured: %s", exc)
        return RelayFailure(kind=FailureKind.CONFIGURATION, message=str(exc))

    logger.info(
        "Relaying chat: model=%s input_len=%s businesses=%s",
        settings.anthropic_model,
        len(req.user_input),
        len(req.businesses),
    )
    payload = build_payload(settings, req.user_input, req.businesses)

    try:
        data = call_messages_api(settings, payload, client)
        text = extract_text(data)
    except UpstreamError as exc:
        logger.error("Error calling Anthropic API: %s", exc)
        if exc.body:
            logger.error("Upstream error details (status=%s): %s", exc.status_code, exc.body)
        return RelayFailure(kind=FailureKind.UPSTREAM, message=f"Error from Anthropic API: {exc}")
    except MalformedResponseError as exc:
        logger.error("Malformed upstream payload: %s", exc)
        return RelayFailure(kind=FailureKind.MALFORMED, message=str(exc))

    logger.info("Upstream responded with %s chars", len(text))
    return ChatReply(text=text)
