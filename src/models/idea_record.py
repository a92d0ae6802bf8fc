"""
Core data model for Idea Capture.

Defines the IdeaRecord dataclass (one saved idea) and the RelatedItem
dataclass (one web search hit attached to it).
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from src.config import RELATED_SUMMARY_CHARS


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


def _tag_text(value: Any) -> Any:
    """Render a scalar tag as text; other values are kept unchanged."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


def as_tag_list(tags: Any) -> List[Any]:
    """
    Coerce whatever the model returned for "tags" into a list.

    None becomes [], a list or tuple is copied, and a single scalar
    ("pets", 5) becomes a one-element list. Numbers and booleans are
    rendered as text.
    """
    if tags is None:
        return []
    if isinstance(tags, (list, tuple)):
        return [_tag_text(tag) for tag in tags]
    return [_tag_text(tags)]


@dataclass
class RelatedItem:
    """
    A web page related to an idea.

    Attributes:
        title: Page title ("Untitled" when the search result had none).
        url: Link to the page. May be None if the search result omitted it.
        summary: Leading text of the page content, at most 300 characters.
    """
    title: str
    url: Optional[str]
    summary: str = ""

    @classmethod
    def from_search_result(cls, raw: Any) -> "RelatedItem":
        """
        Map one raw Tavily result to a RelatedItem.

        Tavily result structure:
        {
            "title": "Example Title",   # Optional
            "url": "https://...",
            "content": "...",           # Optional
            "score": 0.87
        }

        A non-object entry maps to an Untitled item with no url or summary.
        """
        if not isinstance(raw, dict):
            raw = {}
        content = raw.get("content") or ""
        return cls(
            title=raw.get("title") or "Untitled",
            url=raw.get("url"),
            summary=content[:RELATED_SUMMARY_CHARS],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "url": self.url, "summary": self.summary}


@dataclass
class IdeaRecord:
    """
    A summarized idea as it is written to the document store.

    Constructed once after search and summarization, saved once, never
    updated. Tags and related are always lists (possibly empty).

    Attributes:
        summary: Short distillation of the idea. None only when the model
            returned JSON without a summary field.
        tags: Topical keywords, 3-5 expected but not enforced. A single
            scalar from the model is wrapped into a one-element list.
        related: Up to three related web pages.
        created_at: ISO-8601 creation timestamp.
    """
    summary: Optional[str]
    tags: List[str] = field(default_factory=list)
    related: List[RelatedItem] = field(default_factory=list)
    created_at: str = field(default_factory=utc_now_iso)

    def __post_init__(self) -> None:
        self.tags = as_tag_list(self.tags)
        if self.related is None:
            self.related = []

    def to_document(self) -> Dict[str, Any]:
        """
        Convert to the stored document shape.

        Returns:
            {summary, tags, related: [{title, url, summary}], createdAt}
            with summary left out when it is None.
        """
        document: Dict[str, Any] = {}
        if self.summary is not None:
            document["summary"] = self.summary
        document["tags"] = list(self.tags)
        document["related"] = [item.to_dict() for item in self.related]
        document["createdAt"] = self.created_at
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "IdeaRecord":
        """Rebuild a record from a stored document (the _id is ignored)."""
        related = [
            RelatedItem(
                title=r.get("title") or "Untitled",
                url=r.get("url"),
                summary=r.get("summary") or "",
            )
            for r in document.get("related") or []
        ]
        return cls(
            summary=document.get("summary"),
            tags=list(document.get("tags") or []),
            related=related,
            created_at=document.get("createdAt") or utc_now_iso(),
        )

    def __str__(self) -> str:
        return f"{self.summary} [{', '.join(self.tags)}]"
