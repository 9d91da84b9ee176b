"""Closed enumerations used as URL path segments by the Open Opus API."""

from __future__ import annotations

from enum import Enum


class _Catalog(str, Enum):
    """Enum whose members have a fixed external string form for URLs."""

    @property
    def url_str(self) -> str:
        return _URL_FORMS.get(self, self.value)

    @classmethod
    def parse(cls, text: str):
        """Look up a member by external form, JSON value or member name.

        Matching ignores case, spaces, hyphens and underscores, so
        ``"early-romantic"`` and ``"EARLY_ROMANTIC"`` both resolve.
        """
        wanted = _normalize(text)
        for member in cls:
            if wanted in (_normalize(member.url_str), _normalize(member.value), _normalize(member.name)):
                return member
        choices = ", ".join(member.url_str for member in cls)
        raise ValueError(f"Unknown {cls.__name__.lower()} '{text}'. Choose from: {choices}")


class Epoch(_Catalog):
    """Historical period of a composer."""

    MEDIEVAL = "Medieval"
    RENAISSANCE = "Renaissance"
    BAROQUE = "Baroque"
    CLASSICAL = "Classical"
    EARLY_ROMANTIC = "Early Romantic"
    ROMANTIC = "Romantic"
    LATE_ROMANTIC = "Late Romantic"
    TWENTIETH_CENTURY = "20th Century"
    POST_WAR = "Post-War"
    TWENTY_FIRST_CENTURY = "21st Century"


class Genre(_Catalog):
    """Work genre. ``ALL`` only ever appears in URLs, as ``all``."""

    ALL = "All"
    POPULAR = "Popular"
    RECOMMENDED = "Recommended"
    CHAMBER = "Chamber"
    KEYBOARD = "Keyboard"
    ORCHESTRAL = "Orchestral"
    STAGE = "Stage"
    VOCAL = "Vocal"


# Members missing here use their value in URLs.
_URL_FORMS: dict[_Catalog, str] = {
    Genre.ALL: "all",
}


def _normalize(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch not in " -_")
