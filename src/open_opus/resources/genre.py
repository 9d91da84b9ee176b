"""Genre endpoints."""

from __future__ import annotations

from typing import Optional

from open_opus.client.api import borrow_client
from open_opus.client.base import OpenOpusSession
from open_opus.models.enums import Genre
from open_opus.models.status import ComposerId, Envelope


class GenreList(Envelope):
    """Response from ``/genre/list/composer/<id>.json``."""

    genres: Optional[list[Genre]] = None


def composer_genres_path(composer_id: ComposerId) -> str:
    return f"/genre/list/composer/{composer_id}.json"


async def list_by_composer_id(
    composer_id: ComposerId, client: Optional[OpenOpusSession] = None
) -> list[Genre]:
    """List the genres a composer has works in."""
    async with borrow_client(client) as session:
        envelope = await session.fetch(composer_genres_path(composer_id), GenreList)
    envelope.raise_for_status()
    return envelope.genres or []
