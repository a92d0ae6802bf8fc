"""
MongoDB storage backend for Idea Capture.

Implements the IdeaStore interface with pymongo. Each save opens its own
client, inserts one document and closes the client again; there is no
connection reuse between runs.

=============================================================================
DOCUMENT SHAPE
=============================================================================

Collection: MONGODB_COLLECTION (default "ideas") in MONGODB_DB
(default "ai_workshop").

| Field      | Type            | Description                              |
|------------|-----------------|------------------------------------------|
| _id        | ObjectId        | Assigned on insert                       |
| summary    | string          | Short description of the idea            |
| tags       | array<string>   | Topical keywords                         |
| related    | array<object>   | {title, url, summary} from web search    |
| createdAt  | string          | ISO-8601 timestamp                       |

=============================================================================
"""

import sys
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import MongoClient

from src.config import Settings
from src.models.idea_record import IdeaRecord
from src.storage.base import IdeaStore


class MongoIdeaStore(IdeaStore):
    """
    MongoDB-backed storage implementation.

    Configuration comes from a Settings object:
    - mongodb_uri: connection string
    - mongodb_db: database name (default "ai_workshop")
    - mongodb_collection: collection name (default "ideas")
    """

    def __init__(self, settings: Optional[Settings] = None, verbose: bool = False):
        self.settings = settings or Settings.from_env()
        self.verbose = verbose

    @property
    def name(self) -> str:
        return "mongodb"

    def _validate_config(self) -> None:
        """Validate that required configuration is present."""
        if not self.settings.mongodb_uri:
            raise ValueError("MONGODB_URI is not configured")
        if not self.settings.mongodb_db:
            raise ValueError("MONGODB_DB is not configured")

    def _connect(self) -> MongoClient:
        return MongoClient(self.settings.mongodb_uri)

    def save(self, record: IdeaRecord) -> str:
        """
        Insert the record as a new document.

        The client is closed whether or not the insert succeeds. Any failure
        is reported on stderr and re-raised.

        Raises:
            ValueError: If MONGODB_URI is not configured.
            pymongo.errors.PyMongoError: On connection or write failure.
        """
        client = None
        try:
            self._validate_config()
            client = self._connect()
            collection = client[self.settings.mongodb_db][self.settings.mongodb_collection]
            result = collection.insert_one(record.to_document())
            if self.verbose:
                print(f"[{self.name}] Inserted {result.inserted_id}", file=sys.stderr)
            return str(result.inserted_id)
        except Exception as e:
            print(f"Database error: {e}", file=sys.stderr)
            raise
        finally:
            if client is not None:
                client.close()


class MemoryIdeaStore(IdeaStore):
    """
    In-memory storage for dry runs and testing.

    Ids are generated ObjectIds, so they look like the ones MongoDB assigns.
    Data is lost when the process ends.
    """

    def __init__(self):
        self._documents: Dict[str, Dict[str, Any]] = {}

    @property
    def name(self) -> str:
        return "memory"

    def save(self, record: IdeaRecord) -> str:
        """Store a copy of the record's document under a fresh id."""
        doc_id = str(ObjectId())
        self._documents[doc_id] = record.to_document()
        return doc_id

    def get(self, doc_id: str) -> Optional[IdeaRecord]:
        """Get a stored record by id."""
        document = self._documents.get(doc_id)
        if document is None:
            return None
        return IdeaRecord.from_document(document)

    def get_document(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get the raw stored document by id (for testing)."""
        return self._documents.get(doc_id)

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._documents.clear()

    def count(self) -> int:
        """Return number of stored records (for testing)."""
        return len(self._documents)
