from __future__ import annotations

import json
from typing import Iterable

from relay.models import Business


SYSTEM_PROMPT = (
    "You are an AI assistant for seniors in Atlanta, providing information about "
    "local businesses and assistance with daily tasks. Be concise, clear, and "
    "friendly in your responses."
)


def serialize_businesses(businesses: Iterable[Business]) -> str:
    return json.dumps(
        [b.model_dump() for b in businesses],
        separators=(",", ":"),
        ensure_ascii=False,
    )


def build_system_prompt(businesses: Iterable[Business]) -> str:
    return (
        f"{SYSTEM_PROMPT} Use the following business information when relevant: "
        f"{serialize_businesses(businesses)}"
    )
