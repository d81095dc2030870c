"""
Query engine for catalog contents

Pure functions that derive a filtered, searched and sorted view from a
snapshot of contents. The HTTP filter endpoint, the browse listing and
the landing page presets (featured, top rated) all go through
``run_query`` so they agree on semantics:

- text comparisons are case-insensitive
- filters combine with AND, values inside a multi-value filter with OR
- a year or rating that does not parse fails any active numeric filter
  and sorts as the lowest value
- every sort is stable, so ties keep snapshot order
"""
import logging
import math
import re
from typing import Iterable, List, Optional, Tuple

from .models import Content, ContentQuery, SortOrder

logger = logging.getLogger(__name__)

YEAR_FLOOR = 1900
YEAR_CEILING = 2030

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_year(label) -> Optional[int]:
    """Leading integer of a year label ("2017-2021" -> 2017), else None"""
    if label is None:
        return None
    match = _LEADING_INT.match(str(label))
    return int(match.group(1)) if match else None


def parse_rating(value) -> Optional[float]:
    """Numeric rating, or None when the value is not a finite number"""
    if value is None:
        return None
    try:
        rating = float(str(value).strip())
    except ValueError:
        return None
    return rating if math.isfinite(rating) else None


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def matches_text(content: Content, needle: str) -> bool:
    """True if ``needle`` (already lowercased) occurs in title, description or a genre"""
    if needle in content.title.lower() or needle in content.description.lower():
        return True
    return any(needle in g.lower() for g in content.genre)


def matches_genres(content: Content, genres: set) -> bool:
    return any(g.lower() in genres for g in content.genre)


def matches_country(content: Content, countries: set) -> bool:
    return _norm(content.country) in countries


def _sort_key(value) -> Tuple[bool, float]:
    # Unparseable values rank below every real number
    return (value is not None, value if value is not None else 0)


def sort_contents(contents: List[Content], sort_by: SortOrder) -> List[Content]:
    """Stable sort; ``popular`` keeps snapshot order"""
    if sort_by == SortOrder.HIGHEST_RATED:
        return sorted(contents, key=lambda c: _sort_key(parse_rating(c.rating)), reverse=True)
    if sort_by == SortOrder.NEWEST:
        return sorted(contents, key=lambda c: _sort_key(parse_year(c.year)), reverse=True)
    if sort_by == SortOrder.OLDEST:
        return sorted(contents, key=lambda c: _sort_key(parse_year(c.year)))
    return list(contents)


def run_query(contents: Iterable[Content], query: Optional[ContentQuery] = None) -> List[Content]:
    """Apply every active filter of ``query`` to ``contents`` and sort the result"""
    query = query or ContentQuery()
    items = list(contents)
    total = len(items)

    needle = (query.search_text or "").lower()
    if needle:
        items = [c for c in items if matches_text(c, needle)]

    genres = {_norm(g) for g in query.genres if _norm(g)}
    if genres:
        items = [c for c in items if matches_genres(c, genres)]

    countries = {_norm(c) for c in query.countries if _norm(c)}
    if countries:
        items = [c for c in items if matches_country(c, countries)]

    if query.min_rating:
        items = [
            c for c in items
            if (rating := parse_rating(c.rating)) is not None and rating >= query.min_rating
        ]

    if query.year_from is not None or query.year_to is not None:
        year_from = query.year_from if query.year_from is not None else YEAR_FLOOR
        year_to = query.year_to if query.year_to is not None else YEAR_CEILING
        items = [
            c for c in items
            if (year := parse_year(c.year)) is not None and year_from <= year <= year_to
        ]

    result = sort_contents(items, query.sort_by)
    logger.debug(f"Query {query.model_dump(exclude_defaults=True)} matched {len(result)}/{total}")
    return result


def search(contents: Iterable[Content], text: str) -> List[Content]:
    """Contents whose title, description or genres contain ``text``"""
    return run_query(contents, ContentQuery(search_text=text))


def featured(contents: Iterable[Content], min_rating: float = 8.0, limit: int = 6) -> List[Content]:
    """Landing page selection: rated at least ``min_rating``, in store order, at most ``limit``"""
    return run_query(contents, ContentQuery(min_rating=min_rating))[:limit]


def top_rated(contents: Iterable[Content], limit: int = 10) -> List[Content]:
    """Highest rated first, at most ``limit``"""
    return run_query(contents, ContentQuery(sort_by=SortOrder.HIGHEST_RATED))[:limit]
