"""Argument parsing and command dispatch for the ``open-opus`` CLI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import httpx
from rich.logging import RichHandler

from open_opus.cli.display import show_composers_table, show_error, show_genres, show_works_table
from open_opus.client.api import OpenOpusClient
from open_opus.config import AppConfig
from open_opus.errors import OpenOpusAPIError
from open_opus.models.enums import Epoch, Genre
from open_opus.resources import composer as composer_resource
from open_opus.resources import genre as genre_resource
from open_opus.resources import work as work_resource

logger = logging.getLogger(__name__)


def _catalog_arg(enum_type):
    """argparse type for Epoch/Genre that keeps the list of valid choices."""

    def convert(text: str):
        try:
            return enum_type.parse(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    convert.__name__ = enum_type.__name__.lower()
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="open-opus", description="Browse the Open Opus classical music catalogue."
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a config.toml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("popular", help="List popular composers")
    sub.add_parser("essential", help="List essential composers")

    letter = sub.add_parser("letter", help="List composers by first letter of their name")
    letter.add_argument("letter")

    epoch = sub.add_parser("epoch", help="List composers of a historical period")
    epoch.add_argument("epoch", type=_catalog_arg(Epoch))

    search = sub.add_parser("search", help="Search composers by name")
    search.add_argument("word")

    composer = sub.add_parser("composer", help="Show a single composer")
    composer.add_argument("composer_id", type=int)

    genres = sub.add_parser("genres", help="List the genres of a composer")
    genres.add_argument("composer_id", type=int)

    works = sub.add_parser("works", help="List or search the works of a composer")
    works.add_argument("composer_id", type=int)
    works.add_argument("--genre", type=_catalog_arg(Genre), default=Genre.ALL)
    works.add_argument("--search", dest="word", default=None, help="Filter works by title")

    return parser


async def dispatch(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the selected command. Returns the process exit code."""
    async with OpenOpusClient(
        base_url=config.api.base_url, user_agent=config.api.user_agent
    ) as client:
        try:
            await _run_command(args, client)
        except OpenOpusAPIError as exc:
            show_error("Open Opus API Error", exc.message)
            return 1
        except httpx.HTTPError as exc:
            logger.debug("Request failed", exc_info=True)
            show_error("HTTP Error", str(exc) or type(exc).__name__)
            return 1
    return 0


async def _run_command(args: argparse.Namespace, client: OpenOpusClient) -> None:
    command = args.command

    if command == "popular":
        show_composers_table(await composer_resource.list_popular(client), "Popular composers")
    elif command == "essential":
        show_composers_table(
            await composer_resource.list_essential(client), "Essential composers"
        )
    elif command == "letter":
        composers = await composer_resource.list_by_first_letter(args.letter, client)
        show_composers_table(composers, f"Composers starting with {args.letter}")
    elif command == "epoch":
        composers = await composer_resource.list_by_epoch(args.epoch, client)
        show_composers_table(composers, f"{args.epoch.url_str} composers")
    elif command == "search":
        composers = await composer_resource.search(args.word, client)
        show_composers_table(composers, f"Composers matching '{args.word}'")
    elif command == "composer":
        composer = await composer_resource.get_by_id(args.composer_id, client)
        show_composers_table([composer], composer.complete_name)
    elif command == "genres":
        genres = await genre_resource.list_by_composer_id(args.composer_id, client)
        show_genres(genres, args.composer_id)
    elif command == "works":
        if args.word:
            works = await work_resource.search_with_composer_id_and_genre(
                args.composer_id, args.genre, args.word, client
            )
            title = f"Works matching '{args.word}'"
        else:
            works = await work_resource.list_by_composer_id_and_genre(
                args.composer_id, args.genre, client
            )
            title = f"{args.genre.value} works"
        show_works_table(works, title)
    else:
        raise ValueError(f"Unknown command {command!r}")


def configure_logging(level: str, verbose: bool = False) -> None:
    """Send log records through rich; the library itself never configures logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
