"""Search engine module for bookmarks."""
from typing import Any, List, Optional, Protocol, Sequence, Tuple

from bookmark_search.models import MatchResult, NO_MATCH, record_fields
from bookmark_search.scorer import fold_case, query_chars, score_text


TITLE_WEIGHT = 3
TAG_WEIGHT = 2
URL_WEIGHT = 1


class SearchEngine(Protocol):
    """Protocol for search engines to allow extensibility."""

    def search(
        self,
        query: str,
        bookmarks: Sequence[Any],
        limit: Optional[int] = None,
        tags_filter: Optional[List[str]] = None,
    ) -> List[Any]:
        """Search bookmarks based on query.

        Args:
            query: Search query string
            bookmarks: List of bookmarks to search
            limit: Maximum number of results to return (None = no limit)
            tags_filter: Only keep bookmarks carrying all of these tags

        Returns:
            List of matching bookmarks, sorted by relevance
        """
        ...


def _best_tag_result(tags: List[str], query: str, chars: str) -> MatchResult:
    best = NO_MATCH
    for tag in tags:
        result = score_text(tag, query, chars)
        if result.score > best.score:
            best = result
    return best


def score_record(record: Any, query: str, chars: Optional[str] = None) -> Tuple[bool, int]:
    """Score a bookmark record across its title, url and tags.

    Args:
        record: Bookmark dict or object
        query: Trimmed, lower-cased query
        chars: Precomputed fuzzy characters of the query

    Returns:
        Tuple of (matched, combined score)
    """
    if chars is None:
        chars = query_chars(query)

    title, url, tags = record_fields(record)
    title_result = score_text(title, query, chars)
    url_result = score_text(url, query, chars)
    tag_result = _best_tag_result(tags, query, chars)

    matched = title_result.matched or url_result.matched or tag_result.matched
    score = (
        title_result.score * TITLE_WEIGHT
        + tag_result.score * TAG_WEIGHT
        + url_result.score * URL_WEIGHT
    )
    return matched, score


def rank(records: Sequence[Any], query: str) -> Sequence[Any]:
    """Filter and rank records by relevance to a query.

    An empty (or whitespace-only) query returns ``records`` unchanged.
    Records with equal scores keep their input order.

    Args:
        records: Bookmark dicts or objects
        query: Raw user query

    Returns:
        Matching records, highest score first
    """
    normalized = fold_case(query.strip())
    if not normalized:
        return records

    chars = query_chars(normalized)

    scored = []
    for record in records:
        matched, score = score_record(record, normalized, chars)
        if matched:
            scored.append((score, record))

    # Sort by score (descending), ties in input order
    scored.sort(key=lambda x: x[0], reverse=True)

    return [record for _, record in scored]


def _has_tags(record: Any, required: List[str]) -> bool:
    _, _, tags = record_fields(record)
    return all(tag in tags for tag in required)


class FuzzySearchEngine:
    """Weighted substring/fuzzy search over bookmark titles, urls and tags."""

    def search(
        self,
        query: str,
        bookmarks: Sequence[Any],
        limit: Optional[int] = None,
        tags_filter: Optional[List[str]] = None,
    ) -> List[Any]:
        """Search bookmarks, then narrow by tags and truncate.

        Args:
            query: Search query string (empty keeps the original order)
            bookmarks: List of bookmarks to search
            limit: Maximum number of results to return (None = no limit)
            tags_filter: Only keep bookmarks carrying all of these tags

        Returns:
            List of matching bookmarks, sorted by relevance (highest score first)
        """
        results = list(rank(bookmarks, query))

        if tags_filter:
            results = [b for b in results if _has_tags(b, tags_filter)]

        if limit is not None:
            results = results[:max(0, limit)]

        return results
