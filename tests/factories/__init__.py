"""Test data factories."""

from tests.factories.board import (
    CREATED_AT,
    SequentialIds,
    TickingClock,
    make_log,
    make_task,
    task_document,
)

__all__ = [
    "CREATED_AT",
    "SequentialIds",
    "TickingClock",
    "make_log",
    "make_task",
    "task_document",
]
