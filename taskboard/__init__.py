"""Taskboard: audit trail core for a single-writer task board.

Every task mutation is recorded as an immutable audit log entry, the log
is linked into a hash chain, and imported board documents are reconciled
before they replace local state.
"""

__version__ = "0.1.0"
