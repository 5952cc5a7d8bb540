"""AuditLog and Change models."""

from typing import Any

from pydantic import Field

from taskboard.models.base import BoardModel, IsoTimestamp
from taskboard.models.enums import AuditAction

DEFAULT_ACTOR_LABEL = "Alumno/a"


class Change(BoardModel):
    """One attribute delta between two task snapshots.

    An absent old_value means the attribute did not exist before
    (creation); an absent new_value means it no longer exists (deletion).
    """

    field: str = Field(..., min_length=1, description="Document field name")
    old_value: Any | None = Field(default=None, description="Value before")
    new_value: Any | None = Field(default=None, description="Value after")


class AuditLog(BoardModel):
    """Immutable audit record of one task mutation.

    Content fields never change after creation. prev_hash and hash are
    derived by the chain builder and replaced wholesale on rebuild.
    """

    id: str = Field(..., min_length=1, description="Unique identifier")
    timestamp: IsoTimestamp = Field(..., description="Creation time")
    action: AuditAction = Field(..., description="Mutation kind")
    task_id: str = Field(..., min_length=1, description="Referenced task")
    task_title: str = Field(..., min_length=1, description="Title snapshot")
    actor_label: str = Field(..., min_length=1, description="Acting identity")
    changes: list[Change] | None = Field(default=None, description="Field deltas")
    prev_hash: str | None = Field(default=None, description="Previous entry hash")
    hash: str | None = Field(default=None, description="Link hash of this entry")
