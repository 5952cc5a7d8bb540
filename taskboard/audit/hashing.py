"""Canonical serialization and link hashing for audit log entries."""

import json
from typing import Any

from taskboard.models import AuditLog
from taskboard.utils.fnv import fnv1a_hex


def _canonical(value: Any) -> Any:
    """Recursively sort mapping keys so nested content serializes stably."""
    if isinstance(value, dict):
        return {key: _canonical(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_canonical(item) for item in value]
    return value


def canonical_payload(entry: AuditLog, prev_hash: str | None) -> str:
    """Serialize the hashed content of an entry.

    Top-level fields are emitted in a fixed order; nested objects (the
    change list and its values) have sorted keys. The entry's own id,
    stored hash and stored prev_hash are not part of the payload.
    """
    changes = (
        [change.to_document() for change in entry.changes] if entry.changes else None
    )
    payload = {
        "timestamp": entry.timestamp,
        "action": entry.action.value,
        "taskId": entry.task_id,
        "taskTitle": entry.task_title,
        "actorLabel": entry.actor_label,
        "changes": _canonical(changes),
        "prevHash": prev_hash,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def compute_entry_hash(entry: AuditLog, prev_hash: str | None) -> str:
    """Compute the 8-hex-character link hash of an entry.

    The digest is a 32-bit FNV-1a: cheap and deterministic, adequate for
    spotting accidental corruption, and not resistant to deliberate
    forgery.
    """
    return fnv1a_hex(canonical_payload(entry, prev_hash))
