"""Field-level diff between task snapshots."""

from typing import Any

from taskboard.models import AuditAction, Change, Task

# Never reported: creation time is immutable, id only on request
_ALWAYS_EXCLUDED = frozenset({"created_at"})


def _snapshot(task: Task) -> dict[str, Any]:
    """JSON-compatible attribute values keyed by python field name."""
    return task.model_dump(mode="json")


def _diff_fields(include_id_field: bool) -> list[tuple[str, str]]:
    """(python name, document name) pairs in schema declaration order."""
    fields = []
    for name, info in Task.model_fields.items():
        if name in _ALWAYS_EXCLUDED:
            continue
        if name == "id" and not include_id_field:
            continue
        fields.append((name, info.alias or name))
    return fields


def compute_diff(
    action: AuditAction,
    old_task: Task | None = None,
    new_task: Task | None = None,
    include_id_field: bool = False,
) -> list[Change] | None:
    """Compute the ordered list of attribute changes between two snapshots.

    CREATE ignores the old snapshot and DELETE ignores the new one. For
    UPDATE and MOVE, a missing side is treated as absence, so the result
    degrades to a creation or deletion diff.

    Args:
        action: Mutation being recorded
        old_task: Snapshot before the mutation
        new_task: Snapshot after the mutation
        include_id_field: Whether to report the id attribute

    Returns:
        Changes in Task field declaration order, or None when nothing
        changed. Never an empty list.
    """
    if action == AuditAction.CREATE:
        old_task = None
    elif action == AuditAction.DELETE:
        new_task = None

    if old_task is None and new_task is None:
        return None

    old = _snapshot(old_task) if old_task is not None else {}
    new = _snapshot(new_task) if new_task is not None else {}

    changes: list[Change] = []
    for name, field in _diff_fields(include_id_field):
        old_value = old.get(name)
        new_value = new.get(name)
        if old_value is None and new_value is None:
            continue
        if old_value == new_value:
            continue
        changes.append(Change(field=field, old_value=old_value, new_value=new_value))

    return changes or None
