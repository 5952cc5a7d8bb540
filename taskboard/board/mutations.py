"""Copy-on-write task mutations.

Each function takes the current board and returns a new board together
with the audit entry it appended. The input board is never modified.
"""

from taskboard.audit import AuditRecorder, append_log
from taskboard.errors import DuplicateTaskError, TaskNotFoundError
from taskboard.models import AuditAction, AuditLog, BoardData, Task, TaskStatus, dedupe_tags


def _require_task(board: BoardData, task_id: str) -> Task:
    task = board.find_task(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


def _with_entry(board: BoardData, tasks: list[Task], entry: AuditLog) -> BoardData:
    return board.model_copy(update={"tasks": tasks, "logs": append_log(board.logs, entry)})


def create_task(
    board: BoardData, task: Task, recorder: AuditRecorder
) -> tuple[BoardData, AuditLog]:
    """Add a task to the top of the board and record CREATE.

    Raises:
        DuplicateTaskError: If the id is already on the board
    """
    if board.find_task(task.id) is not None:
        raise DuplicateTaskError(task.id)
    task = task.model_copy(update={"tags": dedupe_tags(task.tags)})
    entry = recorder.record(AuditAction.CREATE, new_task=task)
    updated = _with_entry(board, [task, *board.tasks], entry)
    return updated, updated.logs[0]


def update_task(
    board: BoardData, task: Task, recorder: AuditRecorder
) -> tuple[BoardData, AuditLog]:
    """Replace a task's editable attributes and record UPDATE.

    id, public_id and created_at are taken from the stored task.

    Raises:
        TaskNotFoundError: If the task is not on the board
    """
    previous = _require_task(board, task.id)
    task = task.model_copy(
        update={
            "public_id": previous.public_id,
            "created_at": previous.created_at,
            "tags": dedupe_tags(task.tags),
        }
    )
    entry = recorder.record(AuditAction.UPDATE, old_task=previous, new_task=task)
    tasks = [task if t.id == task.id else t for t in board.tasks]
    updated = _with_entry(board, tasks, entry)
    return updated, updated.logs[0]


def move_task(
    board: BoardData, task_id: str, status: TaskStatus, recorder: AuditRecorder
) -> tuple[BoardData, AuditLog | None]:
    """Move a task to another column and record MOVE.

    Moving a task to the column it is already in is a no-op: the same
    board is returned and nothing is recorded.

    Raises:
        TaskNotFoundError: If the task is not on the board
    """
    previous = _require_task(board, task_id)
    if previous.status == status:
        return board, None
    moved = previous.model_copy(update={"status": status})
    entry = recorder.record(AuditAction.MOVE, old_task=previous, new_task=moved)
    tasks = [moved if t.id == task_id else t for t in board.tasks]
    updated = _with_entry(board, tasks, entry)
    return updated, updated.logs[0]


def delete_task(
    board: BoardData, task_id: str, recorder: AuditRecorder
) -> tuple[BoardData, AuditLog]:
    """Remove a task and record DELETE.

    Raises:
        TaskNotFoundError: If the task is not on the board
    """
    previous = _require_task(board, task_id)
    entry = recorder.record(AuditAction.DELETE, old_task=previous)
    tasks = [t for t in board.tasks if t.id != task_id]
    updated = _with_entry(board, tasks, entry)
    return updated, updated.logs[0]
