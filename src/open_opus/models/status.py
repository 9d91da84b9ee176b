"""Response status block shared by every Open Opus endpoint.

Each response carries a ``status`` object whose ``success`` field is the
literal string ``"true"`` or ``"false"``. The two shapes are decoded as a
discriminated union so a malformed status fails the whole response.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from open_opus.errors import OpenOpusAPIError

ComposerId = int


def parse_numeric_id(value: Any) -> int:
    """Decode an id sent as a numeric string, e.g. ``"186"``.

    Bare JSON numbers and non-digit strings are rejected.
    """
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ValueError(f"Invalid id {value!r}, should be a numeric string")


NumericId = Annotated[int, BeforeValidator(parse_numeric_id)]


class OkStatus(BaseModel):
    """Status of a successful response."""

    model_config = ConfigDict(populate_by_name=True)

    success: Literal["true"]
    version: str
    source: str
    rows: int
    processing_time: float = Field(alias="processingtime")
    api: str


class ErrStatus(BaseModel):
    """Status of a failed response, with the server's message."""

    model_config = ConfigDict(populate_by_name=True)

    success: Literal["false"]
    version: str
    error: str
    processing_time: float = Field(alias="processingtime")
    api: str


Status = Annotated[Union[OkStatus, ErrStatus], Field(discriminator="success")]


class Envelope(BaseModel):
    """Outer response object: a status plus an endpoint-specific payload."""

    status: Status

    @property
    def is_ok(self) -> bool:
        return isinstance(self.status, OkStatus)

    def raise_for_status(self) -> None:
        """Raise OpenOpusAPIError with the server's message if the call failed."""
        if isinstance(self.status, ErrStatus):
            raise OpenOpusAPIError(self.status.error)
