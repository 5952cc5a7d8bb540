"""Board stores for serialized board documents."""

from taskboard.config.models.storage import StorageConfig
from taskboard.stores.file import FileBoardStore
from taskboard.stores.inmemory import InMemoryBoardStore
from taskboard.stores.store import BoardStore


def create_board_store(config: StorageConfig) -> BoardStore:
    """Build the store backend selected by configuration."""
    if config.backend == "file":
        return FileBoardStore(config.path)
    return InMemoryBoardStore()


__all__ = [
    "BoardStore",
    "FileBoardStore",
    "InMemoryBoardStore",
    "create_board_store",
]
