"""Async HTTP client for the Open Opus API using httpx."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional, TypeVar

import httpx

from open_opus.client.base import OpenOpusSession
from open_opus.models.status import Envelope, OkStatus

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openopus.org"
DEFAULT_USER_AGENT = "open-opus-python/0.1.0"

E = TypeVar("E", bound=Envelope)


class OpenOpusClient:
    """Asynchronous client for the Open Opus REST API.

    Implements the OpenOpusSession protocol using httpx.AsyncClient.
    Every response is a JSON object shaped like:
        {"status": {"success": "true", ...}, "<payload>": [...]}
    Timeouts and connection pooling are left at httpx defaults.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            transport=transport,
        )

    async def fetch(self, path: str, envelope_type: type[E]) -> E:
        """GET *path* and decode the body into *envelope_type*.

        Non-2xx responses raise ``httpx.HTTPStatusError``; a body that does not
        match the envelope raises ``pydantic.ValidationError``. The envelope's
        own status is left for the caller to check.
        """
        logger.debug("GET %s%s", self.base_url, path)
        resp = await self._client.get(path)
        resp.raise_for_status()
        envelope = envelope_type.model_validate(resp.json())
        if isinstance(envelope.status, OkStatus):
            logger.debug("%s returned %d rows", path, envelope.status.rows)
        else:
            logger.debug("%s failed: %s", path, envelope.status.error)
        return envelope

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> OpenOpusClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()


@asynccontextmanager
async def borrow_client(
    client: Optional[OpenOpusSession] = None,
) -> AsyncIterator[OpenOpusSession]:
    """Yield *client*, or a one-shot OpenOpusClient closed on exit."""
    if client is not None:
        yield client
        return
    async with OpenOpusClient() as owned:
        yield owned
