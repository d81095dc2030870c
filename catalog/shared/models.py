"""
Shared data models for the content catalog
"""
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ContentType(str, Enum):
    """Kind of catalog entry"""
    DRAMA = "drama"
    MOVIE = "movie"


class ContentStatus(str, Enum):
    """Airing status"""
    ONGOING = "ongoing"
    COMPLETED = "completed"
    UPCOMING = "upcoming"


class SortOrder(str, Enum):
    """Orderings understood by the query engine"""
    POPULAR = "popular"
    HIGHEST_RATED = "highest-rated"
    NEWEST = "newest"
    OLDEST = "oldest"


REQUIRED_FIELDS = (
    "title",
    "description",
    "genre",
    "year",
    "country",
    "rating",
    "image_url",
    "type",
    "language",
)


class CatalogModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


def _stringify(v):
    """Accept numbers for string-typed numeric labels (rating, year)"""
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return str(v)
    return v


class ContentPayload(CatalogModel):
    """Fields a client supplies when creating a catalog entry"""
    title: str = Field(..., min_length=1)
    original_title: Optional[str] = None
    description: str
    genre: List[str] = Field(..., min_length=1)
    year: str
    country: str
    rating: str
    image_url: str
    poster_url: Optional[str] = None
    background_url: Optional[str] = None
    trailer_url: Optional[str] = None
    type: ContentType
    status: Optional[ContentStatus] = Field(ContentStatus.COMPLETED, validate_default=True)
    episodes: Optional[str] = None
    duration: Optional[str] = None
    language: str
    director: Optional[List[str]] = None
    writer: Optional[List[str]] = None
    cast: Optional[List[str]] = None
    network: Optional[str] = None
    aired: Optional[str] = None
    tags: Optional[List[str]] = None
    content_rating: Optional[str] = None
    budget: Optional[str] = None
    revenue: Optional[str] = None
    awards: Optional[List[str]] = None
    synopsis: Optional[str] = None
    trivia: Optional[List[str]] = None
    quotes: Optional[List[str]] = None
    soundtrack: Optional[List[str]] = None
    created_by: Optional[str] = None

    @field_validator("rating", "year", mode="before")
    @classmethod
    def numbers_as_labels(cls, v):
        return _stringify(v)


class ContentUpdate(CatalogModel):
    """Partial update; only the fields that are set replace stored values"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="forbid",
    )

    title: Optional[str] = Field(None, min_length=1)
    original_title: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[List[str]] = Field(None, min_length=1)
    year: Optional[str] = None
    country: Optional[str] = None
    rating: Optional[str] = None
    image_url: Optional[str] = None
    poster_url: Optional[str] = None
    background_url: Optional[str] = None
    trailer_url: Optional[str] = None
    type: Optional[ContentType] = None
    status: Optional[ContentStatus] = None
    episodes: Optional[str] = None
    duration: Optional[str] = None
    language: Optional[str] = None
    director: Optional[List[str]] = None
    writer: Optional[List[str]] = None
    cast: Optional[List[str]] = None
    network: Optional[str] = None
    aired: Optional[str] = None
    tags: Optional[List[str]] = None
    content_rating: Optional[str] = None
    budget: Optional[str] = None
    revenue: Optional[str] = None
    awards: Optional[List[str]] = None
    synopsis: Optional[str] = None
    trivia: Optional[List[str]] = None
    quotes: Optional[List[str]] = None
    soundtrack: Optional[List[str]] = None
    created_by: Optional[str] = None

    @field_validator("rating", "year", mode="before")
    @classmethod
    def numbers_as_labels(cls, v):
        return _stringify(v)

    @field_validator(*REQUIRED_FIELDS)
    @classmethod
    def required_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    def changes(self) -> Dict[str, object]:
        """Fields explicitly provided by the caller"""
        return self.model_dump(exclude_unset=True)


class Content(ContentPayload):
    """A stored catalog entry"""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _check_rating(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    try:
        rating = float(v)
    except ValueError:
        raise ValueError("rating must be a number") from None
    if not 0 <= rating <= 10:
        raise ValueError("rating must be between 0 and 10")
    return v


def _check_year(v: Optional[str]) -> Optional[str]:
    # Local import: query imports this module
    from .query import parse_year

    if v is not None and parse_year(v) is None:
        raise ValueError("year must start with a number, e.g. '2020' or '2017-2021'")
    return v


class ContentCreateRequest(ContentPayload):
    """Create payload as validated at the HTTP boundary"""

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, v):
        return _check_rating(v)

    @field_validator("year")
    @classmethod
    def year_has_number(cls, v):
        return _check_year(v)


class ContentUpdateRequest(ContentUpdate):
    """Partial update as validated at the HTTP boundary"""

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, v):
        return _check_rating(v)

    @field_validator("year")
    @classmethod
    def year_has_number(cls, v):
        return _check_year(v)


class ContentQuery(CatalogModel):
    """Filter, search and sort options for the query engine"""
    search_text: Optional[str] = None
    genres: List[str] = Field(default_factory=list)
    countries: List[str] = Field(default_factory=list)
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    min_rating: Optional[float] = Field(None, ge=0, le=10)
    sort_by: SortOrder = SortOrder.POPULAR


class DeleteResponse(BaseModel):
    """Result of a delete call"""
    success: bool


class HealthCheck(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    version: str
    contents: int
    services: Dict[str, str]
