"""Read-only views over the audit trail and evaluation fields."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from taskboard.models import AuditAction, AuditLog, Task, to_iso, utc_now

EMPTY_VALUE = "-"
SUMMARY_RECENT_LIMIT = 5


def filter_logs(
    logs: list[AuditLog],
    action: AuditAction | None = None,
    task_id: str | None = None,
) -> list[AuditLog]:
    """Filter logs by action and by case-insensitive task id substring."""
    needle = task_id.lower() if task_id else None
    return [
        entry
        for entry in logs
        if (action is None or entry.action == action)
        and (needle is None or needle in entry.task_id.lower())
    ]


def format_value(value: Any) -> str:
    """Render a change value for display."""
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if value is None or value == "":
        return EMPTY_VALUE
    return str(value)


def format_changes(entry: AuditLog) -> str:
    """Render an entry's changes as "field: old -> new | ..."."""
    if not entry.changes:
        return EMPTY_VALUE
    return " | ".join(
        f"{change.field}: {format_value(change.old_value)} -> {format_value(change.new_value)}"
        for change in entry.changes
    )


def summarize_logs(logs: list[AuditLog], now: datetime | None = None) -> str:
    """Build the plain-text audit summary shared with reviewers."""
    counts = {action: 0 for action in AuditAction}
    for entry in logs:
        counts[entry.action] += 1

    lines = [
        f"Audit summary ({to_iso(now or utc_now())})",
        f"Total events: {len(logs)}",
        ", ".join(f"{action.value}: {counts[action]}" for action in AuditAction),
        "",
        "Latest events:",
    ]
    lines.extend(
        f"- {entry.action.value} | {entry.task_title} | {entry.task_id}"
        for entry in logs[:SUMMARY_RECENT_LIMIT]
    )
    return "\n".join(lines)


class EvaluationSummary(BaseModel):
    """Aggregate of task evaluation scores."""

    model_config = ConfigDict(frozen=True)

    average: str = Field(..., description="Mean score to one decimal, or '-'")
    scored: int = Field(..., description="Tasks with a score")
    pending: int = Field(..., description="Tasks without a score")


def evaluation_summary(tasks: list[Task]) -> EvaluationSummary:
    """Summarize evaluation scores across tasks."""
    scores = [task.score for task in tasks if task.score is not None]
    average = f"{sum(scores) / len(scores):.1f}" if scores else EMPTY_VALUE
    return EvaluationSummary(
        average=average,
        scored=len(scores),
        pending=len(tasks) - len(scores),
    )
