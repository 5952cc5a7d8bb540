"""Task model."""

import re

from pydantic import Field

from taskboard.models.base import BoardModel, IsoTimestamp, new_id, utc_now_iso
from taskboard.models.enums import Priority, TaskStatus
from taskboard.utils.fnv import fnv1a_hex

PUBLIC_ID_PREFIX = "hx-"
MIN_TITLE_LENGTH = 3
DEFAULT_ESTIMATE_MINUTES = 60

_TAG_SEPARATORS = re.compile(r"[,\n]")


def make_public_id(task_id: str, prefix: str = PUBLIC_ID_PREFIX) -> str:
    """Derive the display fingerprint for a task id."""
    return f"{prefix}{fnv1a_hex(task_id)}"


def dedupe_tags(tags: list[str]) -> list[str]:
    """Drop repeated tags, keeping first occurrences in order."""
    return list(dict.fromkeys(tags))


def parse_tags(text: str) -> list[str]:
    """Parse free-form tag input ("a, #b\\nc") into a clean tag list."""
    tags = []
    for part in _TAG_SEPARATORS.split(text):
        tag = part.strip().removeprefix("#")
        if tag:
            tags.append(tag)
    return dedupe_tags(tags)


class Task(BoardModel):
    """A single task on the board.

    Field declaration order is significant: diffs enumerate fields in
    this order.
    """

    id: str = Field(..., min_length=1, description="Stable unique identifier")
    public_id: str | None = Field(
        default=None, min_length=1, description="Display fingerprint of id"
    )
    title: str = Field(..., min_length=MIN_TITLE_LENGTH, description="Task title")
    description: str | None = Field(default=None, description="Free-text details")
    priority: Priority = Field(..., description="Task priority")
    tags: list[str] = Field(default_factory=list, description="Ordered tags")
    estimate_minutes: int = Field(
        ..., ge=1, strict=True, description="Estimated effort in minutes"
    )
    created_at: IsoTimestamp = Field(..., description="Creation time, never mutated")
    due_date: IsoTimestamp | None = Field(default=None, description="Deadline")
    status: TaskStatus = Field(..., description="Board column")
    observation: str | None = Field(default=None, description="Evaluator notes")
    score: int | None = Field(
        default=None, ge=0, le=10, strict=True, description="Evaluation score"
    )
    comment: str | None = Field(default=None, description="Evaluation comment")

    @classmethod
    def new(
        cls,
        title: str,
        *,
        priority: Priority = Priority.MEDIUM,
        status: TaskStatus = TaskStatus.TODO,
        estimate_minutes: int = DEFAULT_ESTIMATE_MINUTES,
        tags: list[str] | None = None,
        **fields: object,
    ) -> "Task":
        """Build a fresh task with a generated id and creation time."""
        task_id = new_id()
        return cls(
            id=task_id,
            public_id=make_public_id(task_id),
            title=title.strip(),
            priority=priority,
            status=status,
            estimate_minutes=estimate_minutes,
            tags=dedupe_tags(tags or []),
            created_at=utc_now_iso(),
            **fields,
        )
