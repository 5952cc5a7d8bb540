"""Versioned field-mapping table for legacy board documents.

Each schema version lists the record keys it renamed, mapped to their
canonical names. Records are migrated by consulting this table only;
unknown keys are left alone and later ignored by validation.
"""

from collections.abc import Mapping
from typing import Any

# Version 1 documents used Spanish attribute names.
TASK_FIELD_RENAMES: dict[int, dict[str, str]] = {
    1: {
        "titulo": "title",
        "descripcion": "description",
        "prioridad": "priority",
        "estimacionMin": "estimateMinutes",
        "fechaCreacion": "createdAt",
        "fechaLimite": "dueDate",
        "estado": "status",
        "observacionesJavi": "observation",
        "rubricaNota": "score",
        "rubricaComentario": "comment",
    },
}

LOG_FIELD_RENAMES: dict[int, dict[str, str]] = {
    1: {
        "accion": "action",
        "taskTitulo": "taskTitle",
        "userLabel": "actorLabel",
    },
}

# Legacy status values written by older board layouts.
STATUS_ALIASES: dict[str, str] = {
    "in-progress": "doing",
    "in_progress": "doing",
}


def _apply_renames(
    record: Mapping[str, Any], renames: Mapping[int, Mapping[str, str]]
) -> dict[str, Any]:
    migrated = dict(record)
    for version in sorted(renames):
        for legacy, canonical in renames[version].items():
            if legacy not in migrated:
                continue
            value = migrated.pop(legacy)
            # Canonical key wins when a record carries both names
            migrated.setdefault(canonical, value)
    return migrated


def migrate_task_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Rename legacy task keys to their canonical names."""
    migrated = _apply_renames(record, TASK_FIELD_RENAMES)
    status = migrated.get("status")
    if isinstance(status, str) and status in STATUS_ALIASES:
        migrated["status"] = STATUS_ALIASES[status]
    return migrated


def migrate_log_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Rename legacy audit log keys to their canonical names."""
    return _apply_renames(record, LOG_FIELD_RENAMES)


def migrate_document(document: Mapping[str, Any]) -> dict[str, Any]:
    """Rename legacy keys inside a whole board document.

    Non-mapping entries are passed through untouched so that schema
    validation can report them at their original position.
    """
    migrated = dict(document)
    tasks = document.get("tasks")
    if isinstance(tasks, list):
        migrated["tasks"] = [
            migrate_task_record(t) if isinstance(t, Mapping) else t for t in tasks
        ]
    logs = document.get("logs")
    if isinstance(logs, list):
        migrated["logs"] = [
            migrate_log_record(entry) if isinstance(entry, Mapping) else entry
            for entry in logs
        ]
    return migrated
