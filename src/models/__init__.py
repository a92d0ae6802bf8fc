"""
Data models module.

Defines data structures for saved ideas and their related web results.
"""

from src.models.idea_record import IdeaRecord, RelatedItem, as_tag_list, utc_now_iso

__all__ = [
    "IdeaRecord",
    "RelatedItem",
    "as_tag_list",
    "utc_now_iso",
]
