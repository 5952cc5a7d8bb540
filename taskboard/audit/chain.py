"""Hash chain builder and verifier over the newest-first log list.

The chain runs oldest to newest: the entry at newest-first index ``i``
links to the entry at ``i + 1``, and the oldest entry has no prev_hash.

This is a detection aid for accidental corruption, reordering and
structural damage arriving through imports. It is not a security
boundary: anyone able to edit stored content can recompute every hash
and produce a chain that verifies.
"""

from pydantic import BaseModel, ConfigDict, Field

from taskboard.audit.hashing import compute_entry_hash
from taskboard.errors import ChainIntegrityError
from taskboard.models import AuditLog
from taskboard.observability.logging import get_logger

logger = get_logger(__name__)


class ChainVerification(BaseModel):
    """Outcome of verifying a chain."""

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(..., description="Whether every link matched")
    broken_at: int | None = Field(
        default=None, description="Newest-first index of the first bad entry"
    )


def link_entry(entry: AuditLog, prev_hash: str | None) -> AuditLog:
    """Return a copy of entry linked onto prev_hash."""
    return entry.model_copy(
        update={"prev_hash": prev_hash, "hash": compute_entry_hash(entry, prev_hash)}
    )


def rebuild_chain(logs: list[AuditLog]) -> list[AuditLog]:
    """Recompute prev_hash and hash for every entry.

    Stored link values are ignored; the result depends only on entry
    content and position. Idempotent.

    Args:
        logs: Audit logs, newest first

    Returns:
        New newest-first list with freshly derived links
    """
    rebuilt: list[AuditLog] = []
    prev_hash: str | None = None
    for entry in reversed(logs):
        linked = link_entry(entry, prev_hash)
        rebuilt.append(linked)
        prev_hash = linked.hash
    rebuilt.reverse()
    logger.debug("chain_rebuilt", entries=len(rebuilt), head=prev_hash)
    return rebuilt


def append_log(logs: list[AuditLog], entry: AuditLog) -> list[AuditLog]:
    """Link a new entry onto the current head and put it first."""
    head_hash = logs[0].hash if logs else None
    return [link_entry(entry, head_hash), *logs]


def verify_chain(logs: list[AuditLog]) -> ChainVerification:
    """Check stored links against recomputed ones without repairing.

    Walks oldest to newest and stops at the first entry whose stored
    prev_hash or hash disagrees with what its position and content imply.
    """
    expected_prev: str | None = None
    for index in range(len(logs) - 1, -1, -1):
        entry = logs[index]
        if entry.prev_hash != expected_prev:
            return ChainVerification(ok=False, broken_at=index)
        if entry.hash != compute_entry_hash(entry, expected_prev):
            return ChainVerification(ok=False, broken_at=index)
        expected_prev = entry.hash
    return ChainVerification(ok=True)


def ensure_chain_intact(logs: list[AuditLog]) -> None:
    """Verify the chain, raising on the first broken link.

    Raises:
        ChainIntegrityError: If any stored link disagrees with its content
    """
    result = verify_chain(logs)
    if result.broken_at is not None:
        logger.warning("chain_integrity_failed", index=result.broken_at)
        raise ChainIntegrityError(result.broken_at)
