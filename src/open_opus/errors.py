"""Exceptions raised by the Open Opus client.

Transport failures (``httpx.HTTPError``) and decoding failures
(``pydantic.ValidationError``) are not wrapped; they reach the caller as-is.
"""

from __future__ import annotations


class OpenOpusError(Exception):
    """Base class for errors raised by this package."""


class OpenOpusAPIError(OpenOpusError):
    """The API answered with ``success: "false"`` and an error message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
