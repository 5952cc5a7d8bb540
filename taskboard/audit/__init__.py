"""Audit trail: diffs, link hashing, and chain verification."""

from taskboard.audit.chain import (
    ChainVerification,
    append_log,
    ensure_chain_intact,
    link_entry,
    rebuild_chain,
    verify_chain,
)
from taskboard.audit.diff import compute_diff
from taskboard.audit.hashing import canonical_payload, compute_entry_hash
from taskboard.audit.recorder import AuditRecorder

__all__ = [
    "AuditRecorder",
    "ChainVerification",
    "append_log",
    "canonical_payload",
    "compute_diff",
    "compute_entry_hash",
    "ensure_chain_intact",
    "link_entry",
    "rebuild_chain",
    "verify_chain",
]
