"""Enums for the board domain."""

from enum import Enum


class Priority(str, Enum):
    """Task priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    """Board column a task sits in."""

    TODO = "todo"
    DOING = "doing"
    DONE = "done"


class AuditAction(str, Enum):
    """Kind of mutation an audit log entry records.

    - CREATE: Task added to the board
    - UPDATE: Task attributes edited (also used for import id repairs)
    - MOVE: Task moved to another status column
    - DELETE: Task removed; the log keeps its id and title
    """

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    MOVE = "MOVE"
    DELETE = "DELETE"
