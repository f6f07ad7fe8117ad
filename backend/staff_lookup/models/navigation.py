"""Routing decisions handed to the presentation layer."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class NoOp(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["noop"] = "noop"


class DetailView(BaseModel):
    """Open the detail page of a single employee."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["detail"] = "detail"
    identifier: str


class FilteredListing(BaseModel):
    """Open the listing page pre-filtered by ``query``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["listing"] = "listing"
    query: str


Destination = Annotated[Union[NoOp, DetailView, FilteredListing], Field(discriminator="kind")]
