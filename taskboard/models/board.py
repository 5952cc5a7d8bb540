"""BoardData aggregate."""

from pydantic import Field

from taskboard.models.audit_log import AuditLog
from taskboard.models.base import BoardModel
from taskboard.models.task import Task


class BoardData(BoardModel):
    """Top-level aggregate owning all tasks and audit logs.

    Logs are stored newest-first. Values are never mutated in place;
    every board operation returns a new BoardData.
    """

    tasks: list[Task] = Field(..., description="Board tasks")
    logs: list[AuditLog] = Field(..., description="Audit logs, newest first")

    @classmethod
    def empty(cls) -> "BoardData":
        """Return a board with no tasks and no history."""
        return cls(tasks=[], logs=[])

    def find_task(self, task_id: str) -> Task | None:
        """Get a task by id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
