"""BoardStore abstract interface."""

from abc import ABC, abstractmethod


class BoardStore(ABC):
    """Abstract key-value store for serialized board documents.

    Implementations must raise StorageError for any read or write fault
    and must complete each call atomically from the caller's view.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Get the raw text stored under key, or None if absent."""
        pass

    @abstractmethod
    async def set(self, key: str, text: str) -> None:
        """Store raw text under key, replacing any previous value."""
        pass
