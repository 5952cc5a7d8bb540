"""Audit log entry factory."""

from collections.abc import Callable

from taskboard.audit.diff import compute_diff
from taskboard.models import (
    DEFAULT_ACTOR_LABEL,
    AuditAction,
    AuditLog,
    Task,
    new_id,
    utc_now_iso,
)


class AuditRecorder:
    """Builds unlinked audit log entries for task mutations.

    The entry's title and task id come from the new snapshot when there
    is one, otherwise from the old snapshot, so deletions stay readable.
    """

    def __init__(
        self,
        *,
        actor_label: str = DEFAULT_ACTOR_LABEL,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self.actor_label = actor_label
        self._id_factory = id_factory
        self._clock = clock

    def record(
        self,
        action: AuditAction,
        *,
        old_task: Task | None = None,
        new_task: Task | None = None,
    ) -> AuditLog:
        """Create the entry for one mutation.

        Raises:
            ValueError: If both snapshots are missing
        """
        subject = new_task if new_task is not None else old_task
        if subject is None:
            raise ValueError("An audit entry needs at least one task snapshot")
        return AuditLog(
            id=self._id_factory(),
            timestamp=self._clock(),
            action=action,
            task_id=subject.id,
            task_title=subject.title,
            actor_label=self.actor_label,
            changes=compute_diff(action, old_task, new_task),
        )
