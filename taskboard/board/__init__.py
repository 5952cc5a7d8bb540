"""Board operations: mutations, queries, and the board service."""

from taskboard.board.mutations import create_task, delete_task, move_task, update_task
from taskboard.board.queries import (
    EvaluationSummary,
    evaluation_summary,
    filter_logs,
    format_changes,
    format_value,
    summarize_logs,
)
from taskboard.board.service import BoardService

__all__ = [
    "BoardService",
    "EvaluationSummary",
    "create_task",
    "delete_task",
    "evaluation_summary",
    "filter_logs",
    "format_changes",
    "format_value",
    "move_task",
    "summarize_logs",
    "update_task",
]
