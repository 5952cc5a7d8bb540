"""File-backed implementation of BoardStore.

Each key maps to ``<directory>/<key>.json``. Writes go to a sibling
temporary file that is then renamed over the target, so a reader never
sees a half-written document.
"""

import asyncio
import os
from pathlib import Path

from taskboard.errors import StorageError
from taskboard.observability.logging import get_logger
from taskboard.stores.store import BoardStore

logger = get_logger(__name__)


class FileBoardStore(BoardStore):
    """Stores board documents as UTF-8 JSON files in one directory."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """Return the file path used for key."""
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    async def get(self, key: str) -> str | None:
        """Read the document stored under key."""
        path = self.path_for(key)
        try:
            return await asyncio.to_thread(self._read, path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("board_store_read_failed", path=str(path), error=str(e))
            raise StorageError(f"Failed to read {path}: {e}") from e

    async def set(self, key: str, text: str) -> None:
        """Write the document stored under key."""
        path = self.path_for(key)
        try:
            await asyncio.to_thread(self._write, path, text)
        except OSError as e:
            logger.warning("board_store_write_failed", path=str(path), error=str(e))
            raise StorageError(f"Failed to write {path}: {e}") from e

    @staticmethod
    def _read(path: Path) -> str | None:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    @staticmethod
    def _write(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(f".{path.name}.tmp")
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, path)
