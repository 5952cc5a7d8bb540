"""Board domain models.

Contains all Pydantic models for the persisted board document:
- Task for board items
- AuditLog and Change for the audit trail
- BoardData for the aggregate
"""

from taskboard.models.audit_log import DEFAULT_ACTOR_LABEL, AuditLog, Change
from taskboard.models.base import (
    BoardModel,
    IsoTimestamp,
    new_id,
    parse_timestamp,
    to_iso,
    utc_now,
    utc_now_iso,
)
from taskboard.models.board import BoardData
from taskboard.models.enums import AuditAction, Priority, TaskStatus
from taskboard.models.task import (
    DEFAULT_ESTIMATE_MINUTES,
    MIN_TITLE_LENGTH,
    PUBLIC_ID_PREFIX,
    Task,
    dedupe_tags,
    make_public_id,
    parse_tags,
)

__all__ = [
    # Enums
    "AuditAction",
    "Priority",
    "TaskStatus",
    # Models
    "AuditLog",
    "BoardData",
    "BoardModel",
    "Change",
    "Task",
    # Helpers
    "DEFAULT_ACTOR_LABEL",
    "DEFAULT_ESTIMATE_MINUTES",
    "IsoTimestamp",
    "MIN_TITLE_LENGTH",
    "PUBLIC_ID_PREFIX",
    "dedupe_tags",
    "make_public_id",
    "new_id",
    "parse_tags",
    "parse_timestamp",
    "to_iso",
    "utc_now",
    "utc_now_iso",
]
