"""
Base storage abstraction for Idea Capture.

Defines the abstract interface that all storage backends must implement.
This allows swapping MongoDB for an in-memory store in dry runs and tests.
"""

from abc import ABC, abstractmethod

from src.models.idea_record import IdeaRecord


class IdeaStore(ABC):
    """
    Abstract base class for all storage backends.

    Saving is insert-only: every call creates a new document, even for a
    record identical to one saved before.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this storage backend.

        Used for progress output and debugging.
        """
        pass

    @abstractmethod
    def save(self, record: IdeaRecord) -> str:
        """
        Insert one idea record.

        Args:
            record: The IdeaRecord to store.

        Returns:
            The identifier assigned to the new document, as a string.
        """
        pass

    def __str__(self) -> str:
        return f"IdeaStore({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
