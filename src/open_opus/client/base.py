"""Protocol interface for Open Opus API sessions."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from open_opus.models.status import Envelope

E = TypeVar("E", bound=Envelope)


@runtime_checkable
class OpenOpusSession(Protocol):
    """Protocol for objects able to GET a path and decode its envelope.

    Resource functions only depend on this, so tests and callers can swap
    in their own implementation.
    """

    async def fetch(self, path: str, envelope_type: type[E]) -> E: ...
