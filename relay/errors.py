"""Exceptions raised while relaying a chat turn upstream."""

from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    """Base exception for relay errors."""


class ConfigurationError(RelayError):
    """Raised when a required setting (the API key) is missing."""


class UpstreamError(RelayError):
    """Raised when the completion API call fails at transport or HTTP level."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class MalformedResponseError(RelayError):
    """Raised when the completion API answers without usable content."""
