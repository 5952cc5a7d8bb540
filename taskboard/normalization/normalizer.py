"""Model normalizer for loosely-typed and legacy board records.

Turns whatever was read from storage (possibly written by an earlier
schema revision) into canonical Task and AuditLog values, so the diff
engine and chain builder only ever see a single shape.
"""

import math
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import ValidationError

from taskboard.models import (
    DEFAULT_ACTOR_LABEL,
    DEFAULT_ESTIMATE_MINUTES,
    PUBLIC_ID_PREFIX,
    AuditAction,
    AuditLog,
    BoardData,
    Change,
    Priority,
    Task,
    TaskStatus,
    make_public_id,
    new_id,
    parse_timestamp,
    utc_now_iso,
)
from taskboard.normalization.field_map import migrate_log_record, migrate_task_record
from taskboard.observability.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def _enum_or_default(enum_cls: type[E], value: Any, default: E) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        return default


def _as_number(value: Any) -> float | None:
    """Return a finite float for numeric input (including numeric strings)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, int | float) or not math.isfinite(value):
        return None
    return float(value)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _optional_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _valid_timestamp(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    try:
        parse_timestamp(value)
    except ValueError:
        return None
    return value


def coerce_estimate(value: Any, default: int = DEFAULT_ESTIMATE_MINUTES) -> int:
    """Coerce an estimate to a whole number of minutes, at least 1."""
    number = _as_number(value)
    if number is None:
        number = float(default)
    return max(1, _round_half_up(number))


def coerce_score(value: Any) -> int | None:
    """Coerce an evaluation score; out-of-range or non-numeric becomes None."""
    number = _as_number(value)
    if number is None:
        return None
    score = _round_half_up(number)
    if 0 <= score <= 10:
        return score
    return None


def coerce_tags(value: Any) -> list[str]:
    """Keep only string tags; anything that is not a list becomes []."""
    if not isinstance(value, list):
        return []
    return [tag for tag in value if isinstance(tag, str)]


class ModelNormalizer:
    """Coerces raw records into invariant-satisfying board values.

    Defaults applied:
    - priority -> medium, status -> todo
    - estimateMinutes -> configured default, rounded and clamped to >= 1
    - id/publicId/log id -> freshly generated
    - action -> CREATE
    - actorLabel -> configured placeholder identity

    Records that cannot be repaired (for example a task without a usable
    title) raise pydantic's ValidationError from the single-record
    methods and are dropped, with a warning, by normalize_board.
    """

    def __init__(
        self,
        *,
        actor_label: str = DEFAULT_ACTOR_LABEL,
        default_estimate_minutes: int = DEFAULT_ESTIMATE_MINUTES,
        public_id_prefix: str = PUBLIC_ID_PREFIX,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._actor_label = actor_label
        self._default_estimate = default_estimate_minutes
        self._public_id_prefix = public_id_prefix
        self._id_factory = id_factory
        self._clock = clock

    def normalize_task(self, record: Mapping[str, Any]) -> Task:
        """Normalize a single task record."""
        data = migrate_task_record(record)

        task_id = data.get("id")
        if not isinstance(task_id, str) or not task_id:
            task_id = self._id_factory()
        public_id = data.get("publicId")
        if not isinstance(public_id, str) or not public_id:
            public_id = make_public_id(task_id, self._public_id_prefix)

        return Task.model_validate(
            {
                "id": task_id,
                "publicId": public_id,
                "title": data.get("title"),
                "description": _optional_text(data.get("description")),
                "priority": _enum_or_default(
                    Priority, data.get("priority"), Priority.MEDIUM
                ),
                "tags": coerce_tags(data.get("tags")),
                "estimateMinutes": coerce_estimate(
                    data.get("estimateMinutes"), self._default_estimate
                ),
                "createdAt": _valid_timestamp(data.get("createdAt")) or self._clock(),
                "dueDate": _valid_timestamp(data.get("dueDate")),
                "status": _enum_or_default(TaskStatus, data.get("status"), TaskStatus.TODO),
                "observation": _optional_text(data.get("observation")),
                "score": coerce_score(data.get("score")),
                "comment": _optional_text(data.get("comment")),
            }
        )

    def normalize_log(self, record: Mapping[str, Any]) -> AuditLog:
        """Normalize a single audit log record."""
        data = migrate_log_record(record)

        log_id = data.get("id")
        if not isinstance(log_id, str) or not log_id:
            log_id = self._id_factory()
        actor_label = data.get("actorLabel")
        if not isinstance(actor_label, str) or not actor_label:
            actor_label = self._actor_label

        return AuditLog.model_validate(
            {
                "id": log_id,
                "timestamp": _valid_timestamp(data.get("timestamp")) or self._clock(),
                "action": _enum_or_default(AuditAction, data.get("action"), AuditAction.CREATE),
                "taskId": data.get("taskId"),
                "taskTitle": data.get("taskTitle"),
                "actorLabel": actor_label,
                "changes": self._normalize_changes(data.get("changes")),
                "prevHash": _optional_text(data.get("prevHash")),
                "hash": _optional_text(data.get("hash")),
            }
        )

    def _normalize_changes(self, value: Any) -> list[Change] | None:
        if not isinstance(value, list):
            return None
        changes = [
            Change.model_validate(item)
            for item in value
            if isinstance(item, Mapping)
            and isinstance(item.get("field"), str)
            and item.get("field")
        ]
        return changes or None

    def _dedupe_task_ids(self, tasks: list[Task]) -> list[Task]:
        """Keep first occurrences; later tasks sharing an id get a fresh one."""
        taken = {task.id for task in tasks}
        seen: set[str] = set()
        unique: list[Task] = []
        for task in tasks:
            if task.id not in seen:
                seen.add(task.id)
                unique.append(task)
                continue
            fresh = self._id_factory()
            while fresh in taken:
                fresh = self._id_factory()
            taken.add(fresh)
            seen.add(fresh)
            logger.warning("task_id_regenerated", old_id=task.id, new_id=fresh)
            unique.append(
                task.model_copy(
                    update={
                        "id": fresh,
                        "public_id": make_public_id(fresh, self._public_id_prefix),
                    }
                )
            )
        return unique

    def normalize_board(self, data: BoardData | Mapping[str, Any]) -> BoardData:
        """Normalize a whole board.

        Records that cannot be repaired are dropped; tasks repeating an
        earlier task id are kept under a freshly generated id.
        """
        document = data.to_document() if isinstance(data, BoardData) else data

        tasks: list[Task] = []
        raw_tasks = document.get("tasks")
        for index, record in enumerate(raw_tasks if isinstance(raw_tasks, list) else []):
            if not isinstance(record, Mapping):
                logger.warning("task_record_dropped", index=index, reason="not_an_object")
                continue
            try:
                tasks.append(self.normalize_task(record))
            except ValidationError as e:
                logger.warning(
                    "task_record_dropped",
                    index=index,
                    reason="invalid",
                    error_count=e.error_count(),
                )

        tasks = self._dedupe_task_ids(tasks)

        logs: list[AuditLog] = []
        raw_logs = document.get("logs")
        for index, record in enumerate(raw_logs if isinstance(raw_logs, list) else []):
            if not isinstance(record, Mapping):
                logger.warning("log_record_dropped", index=index, reason="not_an_object")
                continue
            try:
                logs.append(self.normalize_log(record))
            except ValidationError as e:
                logger.warning(
                    "log_record_dropped",
                    index=index,
                    reason="invalid",
                    error_count=e.error_count(),
                )

        return BoardData(tasks=tasks, logs=logs)
