"""Exception hierarchy for the taskboard core.

All errors inherit from TaskboardError. Only StorageError originates at
an I/O boundary; the rest describe rejected input or misuse.
"""


class TaskboardError(Exception):
    """Base exception for all taskboard errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ImportParseError(TaskboardError):
    """Raised when an import payload is not parseable JSON."""


class ImportValidationError(TaskboardError):
    """Raised when an import document violates the board schema.

    Carries one message per violation, each prefixed by its field path.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"{len(errors)} validation error(s) in import document")
        self.errors = errors


class ChainIntegrityError(TaskboardError):
    """Raised when a stored hash chain disagrees with its content."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Audit chain broken at log index {index}")
        self.index = index


class StorageError(TaskboardError):
    """Raised when the board store cannot be read or written."""


class TaskNotFoundError(TaskboardError):
    """Raised when a mutation references a task id not on the board."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class DuplicateTaskError(TaskboardError):
    """Raised when creating a task whose id is already on the board."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task id already exists: {task_id}")
        self.task_id = task_id
