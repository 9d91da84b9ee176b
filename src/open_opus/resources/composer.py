"""Composer endpoints.

Each function performs one GET and returns the decoded ``composers`` list,
raising :class:`~open_opus.errors.OpenOpusAPIError` when the API reports a
failure.
"""

from __future__ import annotations

from typing import Optional

from open_opus.client.api import borrow_client
from open_opus.client.base import OpenOpusSession
from open_opus.errors import OpenOpusAPIError
from open_opus.models.composer import Composer, ComposerList
from open_opus.models.enums import Epoch
from open_opus.models.status import ComposerId

POPULAR_PATH = "/composer/list/pop.json"
ESSENTIAL_PATH = "/composer/list/rec.json"


def first_letter_path(letter: str) -> str:
    return f"/composer/list/name/{letter}.json"


def epoch_path(epoch: Epoch) -> str:
    return f"/composer/list/epoch/{epoch.url_str}.json"


def search_path(word: str) -> str:
    return f"/composer/list/search/{word}.json"


def ids_path(composer_id: ComposerId) -> str:
    return f"/composer/list/ids/{composer_id}.json"


async def _list_common(path: str, client: Optional[OpenOpusSession]) -> list[Composer]:
    async with borrow_client(client) as session:
        envelope = await session.fetch(path, ComposerList)
    envelope.raise_for_status()
    return envelope.composers or []


async def list_popular(client: Optional[OpenOpusSession] = None) -> list[Composer]:
    """GET /composer/list/pop.json"""
    return await _list_common(POPULAR_PATH, client)


async def list_essential(client: Optional[OpenOpusSession] = None) -> list[Composer]:
    """GET /composer/list/rec.json"""
    return await _list_common(ESSENTIAL_PATH, client)


async def list_by_first_letter(
    letter: str, client: Optional[OpenOpusSession] = None
) -> list[Composer]:
    """GET /composer/list/name/<letter>.json"""
    return await _list_common(first_letter_path(letter), client)


async def list_by_epoch(epoch: Epoch, client: Optional[OpenOpusSession] = None) -> list[Composer]:
    """GET /composer/list/epoch/<epoch>.json"""
    return await _list_common(epoch_path(epoch), client)


async def search(word: str, client: Optional[OpenOpusSession] = None) -> list[Composer]:
    """GET /composer/list/search/<word>.json -- matches on name fragments."""
    return await _list_common(search_path(word), client)


async def get_by_id(
    composer_id: ComposerId, client: Optional[OpenOpusSession] = None
) -> Composer:
    """GET /composer/list/ids/<id>.json and return the single composer.

    A successful response with no composers raises OpenOpusAPIError, the
    same as when the API itself reports the id as unknown.
    """
    composers = await _list_common(ids_path(composer_id), client)
    if not composers:
        raise OpenOpusAPIError(f"No composer found with id {composer_id}")
    return composers[0]
