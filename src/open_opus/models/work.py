"""Work records as returned by the ``/work`` endpoints."""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from open_opus.models.enums import Genre
from open_opus.models.status import Envelope, NumericId


def parse_flag(value: Any) -> bool:
    """Decode the API's ``"0"``/``"1"`` string flags.

    Anything else, including real JSON booleans and integers, is rejected.
    """
    if value == "0" and isinstance(value, str):
        return False
    if value == "1" and isinstance(value, str):
        return True
    raise ValueError(f'Invalid flag {value!r}, should be "0" or "1"')


Flag = Annotated[bool, BeforeValidator(parse_flag)]


class Work(BaseModel):
    """A single work by a composer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    subtitle: str
    search_terms: str = Field(alias="searchterms")
    popular: Flag
    recommended: Flag
    id: NumericId
    genre: Genre


class WorkList(Envelope):
    """Response from the ``/work/list/...`` endpoints."""

    works: Optional[list[Work]] = None
