from __future__ import annotations

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class Business(BaseModel):
    # extra keys are kept and forwarded into the prompt
    model_config = ConfigDict(extra="allow")

    name: str
    description: str
    phone: str
    email: str


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_input: str = Field(..., alias="userInput", description="User's latest message, forwarded verbatim")
    businesses: List[Business] = Field(
        default_factory=list,
        description="Directory snapshot used as context for the reply",
    )


class ChatReply(BaseModel):
    text: str


class FailureKind(str, Enum):
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    MALFORMED = "malformed"


class RelayFailure(BaseModel):
    kind: FailureKind
    message: str


RelayResult = Union[ChatReply, RelayFailure]
