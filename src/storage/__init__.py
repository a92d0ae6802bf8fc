"""
Storage module.

Handles persistence of ideas to MongoDB or an in-memory backend.
"""

from src.storage.base import IdeaStore
from src.storage.mongo import MongoIdeaStore, MemoryIdeaStore

__all__ = [
    "IdeaStore",
    "MongoIdeaStore",
    "MemoryIdeaStore",
]
