"""Shared fixtures: canned Open Opus response bodies and a client."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from open_opus.client.api import OpenOpusClient

BASE_URL = "https://api.openopus.org"

BACH = {
    "id": "87",
    "name": "Bach",
    "complete_name": "Johann Sebastian Bach",
    "birth": "1685-01-01",
    "death": "1750-01-01",
    "epoch": "Baroque",
    "portrait": "https://assets.openopus.org/portraits/87.jpg",
}

BEETHOVEN = {
    "id": "145",
    "name": "Beethoven",
    "complete_name": "Ludwig van Beethoven",
    "birth": "1770-01-01",
    "death": "1827-01-01",
    "epoch": "Early Romantic",
    "portrait": "https://assets.openopus.org/portraits/145.jpg",
}

CELLO_SONATA = {
    "title": "Cello Sonata no. 3 in A major",
    "subtitle": "Op. 69",
    "searchterms": "",
    "popular": "1",
    "recommended": "1",
    "id": "9341",
    "genre": "Chamber",
}


@pytest.fixture()
def ok_body() -> Callable[..., dict[str, Any]]:
    """Build a successful response body with *items* under *key*."""

    def build(key: str, items: list[Any]) -> dict[str, Any]:
        return {
            "status": {
                "version": "1.19.03",
                "success": "true",
                "source": "db",
                "rows": len(items),
                "processingtime": 0.0031,
                "api": "openopus",
            },
            key: items,
        }

    return build


@pytest.fixture()
def err_body() -> Callable[[str], dict[str, Any]]:
    """Build a failed response body carrying *message*."""

    def build(message: str) -> dict[str, Any]:
        return {
            "status": {
                "version": "1.19.03",
                "success": "false",
                "error": message,
                "processingtime": 0.0012,
                "api": "openopus",
            }
        }

    return build


@pytest.fixture()
async def client():
    c = OpenOpusClient(base_url=BASE_URL)
    yield c
    await c.aclose()


@pytest.fixture()
def bach() -> dict[str, Any]:
    return dict(BACH)


@pytest.fixture()
def beethoven() -> dict[str, Any]:
    return dict(BEETHOVEN)


@pytest.fixture()
def cello_sonata() -> dict[str, Any]:
    return dict(CELLO_SONATA)
