"""Import reconciler.

Turns raw import text into a board that can replace local state:
parse, validate, repair duplicate task ids, and record each repair as an
UPDATE audit entry before rebuilding the chain. Failure is
all-or-nothing and never touches existing board state.
"""

from collections.abc import Callable

from taskboard.audit import compute_diff, rebuild_chain
from taskboard.errors import ImportParseError, ImportValidationError
from taskboard.importing.models import (
    ImportAccepted,
    ImportRejected,
    ImportResult,
    RegeneratedId,
)
from taskboard.importing.validation import parse_document, validate_document
from taskboard.models import (
    DEFAULT_ACTOR_LABEL,
    PUBLIC_ID_PREFIX,
    AuditAction,
    AuditLog,
    Task,
    make_public_id,
    new_id,
    utc_now_iso,
)
from taskboard.observability.logging import get_logger

logger = get_logger(__name__)


class ImportReconciler:
    """Validates and reconciles externally supplied board documents."""

    def __init__(
        self,
        *,
        actor_label: str = DEFAULT_ACTOR_LABEL,
        public_id_prefix: str = PUBLIC_ID_PREFIX,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._actor_label = actor_label
        self._public_id_prefix = public_id_prefix
        self._id_factory = id_factory
        self._clock = clock

    def reconcile(self, raw_text: str | bytes) -> ImportResult:
        """Reconcile an import payload.

        Args:
            raw_text: Raw JSON text of a board document

        Returns:
            ImportAccepted with the reconciled board and id substitutions,
            or ImportRejected with itemized errors
        """
        try:
            board = validate_document(parse_document(raw_text))
        except ImportParseError as e:
            logger.warning("import_rejected", reason="parse_error")
            return ImportRejected(errors=[e.message])
        except ImportValidationError as e:
            logger.warning(
                "import_rejected", reason="validation_error", error_count=len(e.errors)
            )
            return ImportRejected(errors=e.errors)

        tasks, regenerated = self._dedupe_task_ids(board.tasks)
        if not regenerated:
            logger.info(
                "import_accepted",
                task_count=len(board.tasks),
                log_count=len(board.logs),
                regenerated_count=0,
            )
            return ImportAccepted(board=board, regenerated=[])

        tasks_by_id = {task.id: task for task in tasks}
        logs = list(board.logs)
        for pair in regenerated:
            logs = [self._repair_entry(tasks_by_id[pair.new_id], pair.old_id), *logs]

        reconciled = board.model_copy(update={"tasks": tasks, "logs": rebuild_chain(logs)})
        logger.info(
            "import_accepted",
            task_count=len(tasks),
            log_count=len(reconciled.logs),
            regenerated_count=len(regenerated),
        )
        return ImportAccepted(board=reconciled, regenerated=regenerated)

    def _dedupe_task_ids(
        self, tasks: list[Task]
    ) -> tuple[list[Task], list[RegeneratedId]]:
        """Keep first occurrences; give later duplicates fresh ids."""
        document_ids = {task.id for task in tasks}
        seen: set[str] = set()
        kept: list[Task] = []
        regenerated: list[RegeneratedId] = []

        for task in tasks:
            if task.id not in seen:
                seen.add(task.id)
                kept.append(task)
                continue

            fresh = self._id_factory()
            while fresh in seen or fresh in document_ids:
                fresh = self._id_factory()
            seen.add(fresh)
            kept.append(
                task.model_copy(
                    update={
                        "id": fresh,
                        "public_id": make_public_id(fresh, self._public_id_prefix),
                    }
                )
            )
            regenerated.append(RegeneratedId(old_id=task.id, new_id=fresh))

        return kept, regenerated

    def _repair_entry(self, task: Task, old_id: str) -> AuditLog:
        """Build the UPDATE entry recording an id substitution."""
        prior = task.model_copy(update={"id": old_id})
        return AuditLog(
            id=self._id_factory(),
            timestamp=self._clock(),
            action=AuditAction.UPDATE,
            task_id=task.id,
            task_title=task.title,
            actor_label=self._actor_label,
            changes=compute_diff(
                AuditAction.UPDATE, prior, task, include_id_field=True
            ),
        )


def reconcile_import(
    raw_text: str | bytes,
    *,
    actor_label: str = DEFAULT_ACTOR_LABEL,
    public_id_prefix: str = PUBLIC_ID_PREFIX,
    id_factory: Callable[[], str] = new_id,
    clock: Callable[[], str] = utc_now_iso,
) -> ImportResult:
    """Reconcile an import payload with a one-off reconciler."""
    reconciler = ImportReconciler(
        actor_label=actor_label,
        public_id_prefix=public_id_prefix,
        id_factory=id_factory,
        clock=clock,
    )
    return reconciler.reconcile(raw_text)
