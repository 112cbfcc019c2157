"""Media models shared by the catalog providers and the UI."""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class MediaType(str, Enum):
    """Media type for search."""

    MOVIE = "movie"
    BOOK = "book"


class MovieHit(BaseModel):
    """A movie search result (lightweight for grid display)."""

    type: Literal["movie"] = "movie"
    id: str
    title: str
    year: Optional[str] = None
    poster: Optional[str] = None


class BookHit(BaseModel):
    """A book search result (lightweight for grid display)."""

    type: Literal["book"] = "book"
    id: str
    title: str
    year: Optional[str] = None
    poster: Optional[str] = None
    authors: Optional[str] = None  # e.g. "Kent Beck, Cynthia Andres"


Hit = Annotated[Union[MovieHit, BookHit], Field(discriminator="type")]

HitAdapter = TypeAdapter(Hit)
HitList = TypeAdapter(List[Hit])


class MovieDetails(BaseModel):
    """Full movie record shown in the details modal."""

    type: Literal["movie"] = "movie"
    title: str
    year: Optional[str] = None
    genre: Optional[str] = None
    plot: Optional[str] = None
    runtime: Optional[str] = None
    director: Optional[str] = None
    actors: Optional[str] = None
    poster: Optional[str] = None
    rating: Optional[str] = None


class BookDetails(BaseModel):
    """Full book record shown in the details modal."""

    type: Literal["book"] = "book"
    title: str
    authors: Optional[str] = None
    published_date: Optional[str] = None
    description: Optional[str] = None
    page_count: Optional[int] = None
    categories: List[str] = []
    image: Optional[str] = None
    preview_link: Optional[str] = None


Details = Annotated[Union[MovieDetails, BookDetails], Field(discriminator="type")]
