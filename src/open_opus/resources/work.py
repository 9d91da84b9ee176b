"""Work endpoints.

Paths are built from raw path segments; httpx percent-encodes spaces and
other reserved characters when the request is sent.
"""

from __future__ import annotations

from typing import Optional

from open_opus.client.api import borrow_client
from open_opus.client.base import OpenOpusSession
from open_opus.models.enums import Genre
from open_opus.models.status import ComposerId
from open_opus.models.work import Work, WorkList


def list_path(composer_id: ComposerId, genre: Genre) -> str:
    return f"/work/list/composer/{composer_id}/genre/{genre.url_str}.json"


def search_path(composer_id: ComposerId, genre: Genre, word: str) -> str:
    return f"/work/list/composer/{composer_id}/genre/{genre.url_str}/search/{word}.json"


async def _list_common(path: str, client: Optional[OpenOpusSession]) -> list[Work]:
    async with borrow_client(client) as session:
        envelope = await session.fetch(path, WorkList)
    envelope.raise_for_status()
    return envelope.works or []


async def list_by_composer_id_and_genre(
    composer_id: ComposerId, genre: Genre, client: Optional[OpenOpusSession] = None
) -> list[Work]:
    """List a composer's works in *genre* (``Genre.ALL`` for every work)."""
    return await _list_common(list_path(composer_id, genre), client)


async def search_with_composer_id_and_genre(
    composer_id: ComposerId,
    genre: Genre,
    word: str,
    client: Optional[OpenOpusSession] = None,
) -> list[Work]:
    """Search a composer's works in *genre* by title."""
    return await _list_common(search_path(composer_id, genre, word), client)
