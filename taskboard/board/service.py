"""Board service: owns the current board and its persistence.

All mutations run through this service so that every change produces
an audit entry, the chain is rebuilt, and the result is saved through
the configured store handle.
"""

import json
from collections.abc import Callable, Mapping
from typing import Any

from taskboard.audit import (
    AuditRecorder,
    ChainVerification,
    rebuild_chain,
    verify_chain,
)
from taskboard.board import mutations
from taskboard.config import Settings, get_settings
from taskboard.errors import StorageError
from taskboard.importing import ImportAccepted, ImportReconciler, ImportResult
from taskboard.models import (
    AuditLog,
    BoardData,
    Task,
    TaskStatus,
    new_id,
    utc_now_iso,
)
from taskboard.normalization import ModelNormalizer
from taskboard.observability.logging import get_logger
from taskboard.stores import BoardStore

logger = get_logger(__name__)


class BoardService:
    """Single-writer owner of the board aggregate.

    Storage faults never propagate out of this service: an unreadable
    store loads as an empty board, and a failed save keeps the new board
    in memory with ``pending_save`` set until a later save succeeds.
    """

    def __init__(
        self,
        store: BoardStore,
        settings: Settings | None = None,
        *,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        settings = settings if settings is not None else get_settings()
        audit = settings.audit

        self._store = store
        self._key = settings.storage.key
        self._normalizer = ModelNormalizer(
            actor_label=audit.actor_label,
            default_estimate_minutes=audit.default_estimate_minutes,
            public_id_prefix=audit.public_id_prefix,
            id_factory=id_factory,
            clock=clock,
        )
        self._recorder = AuditRecorder(
            actor_label=audit.actor_label, id_factory=id_factory, clock=clock
        )
        self._reconciler = ImportReconciler(
            actor_label=audit.actor_label,
            public_id_prefix=audit.public_id_prefix,
            id_factory=id_factory,
            clock=clock,
        )
        self._board = BoardData.empty()
        self.pending_save = False

    @property
    def board(self) -> BoardData:
        """The current board value."""
        return self._board

    def _prepare(self, data: BoardData | Mapping[str, Any]) -> BoardData:
        """Normalize and rebuild the chain: the canonical pre-persist shape."""
        normalized = self._normalizer.normalize_board(data)
        return normalized.model_copy(update={"logs": rebuild_chain(normalized.logs)})

    async def load(self) -> BoardData:
        """Load the board from the store.

        Missing, unreadable, or unparsable documents yield an empty board.
        """
        try:
            raw = await self._store.get(self._key)
        except StorageError as e:
            logger.warning("board_load_failed", key=self._key, error=e.message)
            self._board = BoardData.empty()
            return self._board

        if raw is None:
            logger.info("board_not_found", key=self._key)
            self._board = BoardData.empty()
            return self._board

        try:
            document = json.loads(raw)
        except ValueError:
            document = None
        if not isinstance(document, dict):
            logger.warning("board_document_unreadable", key=self._key)
            self._board = BoardData.empty()
            return self._board

        normalized = self._normalizer.normalize_board(document)
        stored = verify_chain(normalized.logs)
        if not stored.ok:
            logger.warning(
                "stored_chain_mismatch", key=self._key, index=stored.broken_at
            )
        self._board = normalized.model_copy(
            update={"logs": rebuild_chain(normalized.logs)}
        )
        logger.info(
            "board_loaded",
            key=self._key,
            task_count=len(self._board.tasks),
            log_count=len(self._board.logs),
        )
        return self._board

    async def save(self, board: BoardData) -> BoardData:
        """Normalize, rebuild the chain, and persist a board.

        The prepared board becomes current whether or not the write
        succeeds.
        """
        prepared = self._prepare(board)
        self._board = prepared
        text = json.dumps(prepared.to_document(), ensure_ascii=False)
        try:
            await self._store.set(self._key, text)
        except StorageError as e:
            self.pending_save = True
            logger.error("board_save_failed", key=self._key, error=e.message)
            return prepared
        self.pending_save = False
        logger.debug("board_saved", key=self._key, log_count=len(prepared.logs))
        return prepared

    async def create_task(self, task: Task) -> AuditLog:
        """Add a task and persist; returns the CREATE entry."""
        board, _ = mutations.create_task(self._board, task, self._recorder)
        saved = await self.save(board)
        logger.info("task_created", task_id=task.id)
        return saved.logs[0]

    async def update_task(self, task: Task) -> AuditLog:
        """Edit a task and persist; returns the UPDATE entry."""
        board, _ = mutations.update_task(self._board, task, self._recorder)
        saved = await self.save(board)
        logger.info("task_updated", task_id=task.id)
        return saved.logs[0]

    async def move_task(self, task_id: str, status: TaskStatus) -> AuditLog | None:
        """Move a task and persist; returns None when already in status."""
        board, entry = mutations.move_task(self._board, task_id, status, self._recorder)
        if entry is None:
            return None
        saved = await self.save(board)
        logger.info("task_moved", task_id=task_id, status=status.value)
        return saved.logs[0]

    async def delete_task(self, task_id: str) -> AuditLog:
        """Delete a task and persist; returns the DELETE entry."""
        board, _ = mutations.delete_task(self._board, task_id, self._recorder)
        saved = await self.save(board)
        logger.info("task_deleted", task_id=task_id)
        return saved.logs[0]

    async def import_board(self, raw_text: str | bytes) -> ImportResult:
        """Replace the board with an imported document.

        A rejected import leaves the current board and chain untouched.
        """
        result = self._reconciler.reconcile(raw_text)
        if isinstance(result, ImportAccepted):
            await self.save(result.board)
        return result

    def export_board(self) -> str:
        """Serialize the current board as pretty-printed JSON."""
        return json.dumps(self._board.to_document(), indent=2, ensure_ascii=False)

    def verify(self) -> ChainVerification:
        """Verify the current board's audit chain."""
        return verify_chain(self._board.logs)
