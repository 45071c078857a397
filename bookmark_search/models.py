"""Data types shared by the ranking and highlight engines."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a query against a single piece of text."""
    matched: bool
    score: int


NO_MATCH = MatchResult(matched=False, score=0)


@dataclass(frozen=True)
class Span:
    """Half-open character range [start, end) into the original text."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Invalid span: [{self.start}, {self.end})")


@dataclass(frozen=True)
class Segment:
    """A slice of text tagged as highlighted or plain."""
    text: str
    highlighted: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "highlighted": self.highlighted}


@dataclass(frozen=True)
class Bookmark:
    """A bookmark record as consumed by the search engine.

    Plain dicts with the same keys work too; the engine only reads
    ``title``, ``search_title``, ``url`` and ``tags``.
    """
    title: str = ""
    url: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    search_title: Optional[str] = None
    id: str = ""
    folder: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bookmark":
        """Build a bookmark from a dict, treating missing fields as empty.

        Args:
            data: Dict with any of 'id', 'title', 'search_title', 'url', 'tags', 'folder'

        Returns:
            Bookmark instance
        """
        tags = data.get("tags") or []
        return cls(
            title=data.get("title") or "",
            url=data.get("url") or "",
            tags=tuple(tag for tag in tags if isinstance(tag, str)),
            search_title=data.get("search_title") or None,
            id=str(data.get("id") or ""),
            folder=data.get("folder") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "tags": list(self.tags),
        }
        if self.search_title:
            result["search_title"] = self.search_title
        if self.folder:
            result["folder"] = self.folder
        return result


def _get(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def record_fields(record: Any) -> Tuple[str, str, List[str]]:
    """Extract the matchable fields of a record.

    Works for dicts and for objects with attributes. Missing or malformed
    fields are treated as empty.

    Args:
        record: Bookmark-like record

    Returns:
        Tuple of (title, url, tags), where title prefers 'search_title'
    """
    title = _get(record, "search_title")
    if not isinstance(title, str) or not title:
        title = _get(record, "title")
    if not isinstance(title, str):
        title = ""

    url = _get(record, "url")
    if not isinstance(url, str):
        url = ""

    raw_tags = _get(record, "tags")
    if isinstance(raw_tags, (list, tuple)):
        tags = [tag for tag in raw_tags if isinstance(tag, str)]
    else:
        tags = []

    return title, url, tags
