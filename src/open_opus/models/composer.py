"""Composer records and the operations reachable from a fetched composer."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

from open_opus.models.enums import Epoch, Genre
from open_opus.models.status import Envelope, NumericId
from open_opus.models.work import Work
from open_opus.resources import genre as genre_resource
from open_opus.resources import work as work_resource

if TYPE_CHECKING:
    from open_opus.client.base import OpenOpusSession


class Composer(BaseModel):
    """A composer as listed by the ``/composer`` endpoints.

    The API sends ``id`` as a numeric string; it is decoded to an int.
    ``birth`` and ``death`` are ``None`` when unknown (or still alive).
    """

    model_config = ConfigDict(frozen=True)

    id: NumericId
    name: str
    complete_name: str
    birth: Optional[date] = None
    death: Optional[date] = None
    epoch: Epoch
    portrait: str

    async def genres(self, client: OpenOpusSession | None = None) -> list[Genre]:
        """GET /genre/list/composer/<id>.json"""
        return await genre_resource.list_by_composer_id(self.id, client=client)

    async def works(self, client: OpenOpusSession | None = None) -> list[Work]:
        """GET /work/list/composer/<id>/genre/all.json"""
        return await self.works_by_genre(Genre.ALL, client=client)

    async def popular_works(self, client: OpenOpusSession | None = None) -> list[Work]:
        """GET /work/list/composer/<id>/genre/Popular.json"""
        return await self.works_by_genre(Genre.POPULAR, client=client)

    async def recommended_works(self, client: OpenOpusSession | None = None) -> list[Work]:
        """GET /work/list/composer/<id>/genre/Recommended.json"""
        return await self.works_by_genre(Genre.RECOMMENDED, client=client)

    async def works_by_genre(
        self, genre: Genre, client: OpenOpusSession | None = None
    ) -> list[Work]:
        """GET /work/list/composer/<id>/genre/<genre>.json"""
        return await work_resource.list_by_composer_id_and_genre(self.id, genre, client=client)

    async def search_works(
        self,
        word: str,
        genre: Genre = Genre.ALL,
        client: OpenOpusSession | None = None,
    ) -> list[Work]:
        """GET /work/list/composer/<id>/genre/<genre>/search/<word>.json"""
        return await work_resource.search_with_composer_id_and_genre(
            self.id, genre, word, client=client
        )


class ComposerList(Envelope):
    """Response from the ``/composer/list/...`` endpoints."""

    composers: Optional[list[Composer]] = None
