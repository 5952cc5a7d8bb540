"""In-memory implementation of BoardStore."""

from taskboard.stores.store import BoardStore


class InMemoryBoardStore(BoardStore):
    """In-memory implementation of BoardStore for testing and development.

    Nothing survives the process.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Initialize storage, optionally pre-seeded."""
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        """Get the raw text stored under key."""
        return self._data.get(key)

    async def set(self, key: str, text: str) -> None:
        """Store raw text under key."""
        self._data[key] = text
