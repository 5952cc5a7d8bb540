"""Tests for import validation and reconciliation."""

import json
from typing import Any

import pytest

from taskboard.audit import verify_chain
from taskboard.importing import (
    PARSE_ERROR_MESSAGE,
    ImportAccepted,
    ImportReconciler,
    ImportRejected,
    RegeneratedId,
    reconcile_import,
)
from taskboard.models import AuditAction, Change, make_public_id
from tests.factories import SequentialIds, TickingClock, task_document


def dump(document: Any) -> str:
    return json.dumps(document)


@pytest.fixture
def reconciler() -> ImportReconciler:
    return ImportReconciler(
        actor_label="Tester", id_factory=SequentialIds("gen"), clock=TickingClock()
    )


def log_document(log_id: str = "log-1", **overrides: Any) -> dict[str, Any]:
    document: dict[str, Any] = {
        "id": log_id,
        "timestamp": "2025-01-06T10:00:00.000Z",
        "action": "CREATE",
        "taskId": "task-1",
        "taskTitle": "Patrol Perimeter",
        "actorLabel": "Alumno/a",
    }
    document.update(overrides)
    return document


def accepted(result: Any) -> ImportAccepted:
    assert isinstance(result, ImportAccepted), result
    return result


def rejected(result: Any) -> ImportRejected:
    assert isinstance(result, ImportRejected), result
    return result


class TestRejection:
    """Documents that must be rejected as a whole."""

    def test_unparseable_text(self, reconciler: ImportReconciler) -> None:
        """Broken JSON yields a single parse error."""
        result = rejected(reconciler.reconcile("{not json"))
        assert result.errors == [PARSE_ERROR_MESSAGE]
        assert not result.ok

    def test_empty_object(self, reconciler: ImportReconciler) -> None:
        """Both top-level collections are required."""
        result = rejected(reconciler.reconcile("{}"))
        assert [error.split(":")[0] for error in result.errors] == ["tasks", "logs"]

    def test_missing_logs(self, reconciler: ImportReconciler) -> None:
        """A document without logs is rejected."""
        result = rejected(reconciler.reconcile(dump({"tasks": []})))
        assert len(result.errors) == 1
        assert result.errors[0].startswith("logs: ")

    def test_non_object_document(self, reconciler: ImportReconciler) -> None:
        """A top-level list is reported at the root."""
        result = rejected(reconciler.reconcile("[]"))
        assert len(result.errors) == 1
        assert result.errors[0].startswith("(root): ")

    def test_short_title(self, reconciler: ImportReconciler) -> None:
        """Field errors carry their dotted path."""
        document = {"tasks": [task_document(title="ab")], "logs": []}
        result = rejected(reconciler.reconcile(dump(document)))
        assert len(result.errors) == 1
        assert result.errors[0].startswith("tasks.0.title: ")

    def test_errors_are_aggregated(self, reconciler: ImportReconciler) -> None:
        """Every violation is reported, not only the first."""
        document = {
            "tasks": [
                task_document("t1"),
                task_document("t2", estimateMinutes=0, priority="urgent"),
            ],
            "logs": [log_document(action="ARCHIVE")],
        }
        result = rejected(reconciler.reconcile(dump(document)))
        paths = sorted(error.split(":")[0] for error in result.errors)
        assert paths == ["logs.0.action", "tasks.1.estimateMinutes", "tasks.1.priority"]

    def test_fractional_estimate_rejected(self, reconciler: ImportReconciler) -> None:
        """Imports are validated, not coerced."""
        document = {"tasks": [task_document(estimateMinutes=1.5)], "logs": []}
        result = rejected(reconciler.reconcile(dump(document)))
        assert result.errors[0].startswith("tasks.0.estimateMinutes: ")

    def test_naive_timestamp_rejected(self, reconciler: ImportReconciler) -> None:
        """Timestamps need an explicit offset."""
        document = {"tasks": [task_document(createdAt="2025-01-06T09:00:00")], "logs": []}
        result = rejected(reconciler.reconcile(dump(document)))
        assert result.errors[0].startswith("tasks.0.createdAt: ")


class TestAcceptance:
    """Documents that pass validation."""

    def test_empty_board(self, reconciler: ImportReconciler) -> None:
        """An empty board is accepted as is."""
        result = accepted(reconciler.reconcile(dump({"tasks": [], "logs": []})))
        assert result.ok
        assert result.board.tasks == []
        assert result.board.logs == []
        assert result.regenerated == []

    def test_unique_ids_unchanged(self, reconciler: ImportReconciler) -> None:
        """Without duplicates the validated board is returned untouched."""
        document = {
            "tasks": [task_document("t1"), task_document("t2")],
            "logs": [log_document(hash="deadbeef")],
        }
        result = accepted(reconciler.reconcile(dump(document)))
        assert [task.id for task in result.board.tasks] == ["t1", "t2"]
        assert result.board.logs[0].hash == "deadbeef"
        assert result.regenerated == []

    def test_accepts_bytes(self, reconciler: ImportReconciler) -> None:
        """Raw bytes are parsed like text."""
        result = reconciler.reconcile(dump({"tasks": [], "logs": []}).encode())
        assert result.ok

    def test_legacy_spanish_document(self, reconciler: ImportReconciler) -> None:
        """Version 1 field names are mapped before validation."""
        document = {
            "tasks": [
                {
                    "id": "t1",
                    "titulo": "Revisar informe",
                    "prioridad": "high",
                    "tags": [],
                    "estimacionMin": 45,
                    "fechaCreacion": "2025-01-06T09:00:00.000Z",
                    "estado": "in-progress",
                    "rubricaNota": 8,
                }
            ],
            "logs": [
                {
                    "id": "log-1",
                    "timestamp": "2025-01-06T10:00:00.000Z",
                    "accion": "CREATE",
                    "taskId": "t1",
                    "taskTitulo": "Revisar informe",
                    "userLabel": "Alumno/a",
                }
            ],
        }
        result = accepted(reconciler.reconcile(dump(document)))
        task = result.board.tasks[0]
        assert task.title == "Revisar informe"
        assert task.status == "doing"
        assert task.estimate_minutes == 45
        assert task.score == 8
        assert result.board.logs[0].action == AuditAction.CREATE
        assert result.board.logs[0].task_title == "Revisar informe"


class TestDuplicateIds:
    """Duplicate task id repair."""

    def test_second_occurrence_regenerated(self, reconciler: ImportReconciler) -> None:
        """The first "abc" keeps its id; the second gets a fresh one."""
        document = {
            "tasks": [
                task_document("abc", title="First copy"),
                task_document("abc", title="Second copy"),
            ],
            "logs": [],
        }
        result = accepted(reconciler.reconcile(dump(document)))

        first, second = result.board.tasks
        assert first.id == "abc"
        assert first.title == "First copy"
        assert second.id == "gen-1"
        assert second.title == "Second copy"
        assert second.public_id == make_public_id("gen-1")
        assert result.regenerated == [RegeneratedId(old_id="abc", new_id="gen-1")]

    def test_repair_is_audited(self, reconciler: ImportReconciler) -> None:
        """Each substitution adds a linked UPDATE entry naming the new id."""
        document = {
            "tasks": [task_document("abc"), task_document("abc", title="Second copy")],
            "logs": [log_document(taskId="abc")],
        }
        result = accepted(reconciler.reconcile(dump(document)))

        logs = result.board.logs
        assert len(logs) == 2
        repair = logs[0]
        assert repair.id == "gen-2"
        assert repair.action == AuditAction.UPDATE
        assert repair.task_id == "gen-1"
        assert repair.task_title == "Second copy"
        assert repair.actor_label == "Tester"
        assert repair.timestamp == "2025-01-06T10:00:00.000Z"
        assert repair.changes == [Change(field="id", old_value="abc", new_value="gen-1")]
        assert logs[1].id == "log-1"
        assert verify_chain(logs).ok

    def test_generated_collisions_skipped(self) -> None:
        """Fresh ids never collide with ids already in the document."""
        ids = iter(["abc", "t2", "fresh", "log-x"])
        reconciler = ImportReconciler(id_factory=lambda: next(ids), clock=TickingClock())
        document = {
            "tasks": [task_document("abc"), task_document("t2"), task_document("abc")],
            "logs": [],
        }
        result = accepted(reconciler.reconcile(dump(document)))
        assert [task.id for task in result.board.tasks] == ["abc", "t2", "fresh"]
        assert result.board.logs[0].id == "log-x"

    def test_multiple_duplicates_in_order(self, reconciler: ImportReconciler) -> None:
        """Substitutions are reported in encounter order, newest repair first."""
        document = {
            "tasks": [
                task_document("abc", title="Copy one"),
                task_document("abc", title="Copy two"),
                task_document("abc", title="Copy three"),
            ],
            "logs": [],
        }
        result = accepted(reconciler.reconcile(dump(document)))

        assert [task.id for task in result.board.tasks] == ["abc", "gen-1", "gen-2"]
        assert result.regenerated == [
            RegeneratedId(old_id="abc", new_id="gen-1"),
            RegeneratedId(old_id="abc", new_id="gen-2"),
        ]
        assert [(log.id, log.task_id) for log in result.board.logs] == [
            ("gen-4", "gen-2"),
            ("gen-3", "gen-1"),
        ]
        assert verify_chain(result.board.logs).ok

    def test_unique_ids_after_repair(self, reconciler: ImportReconciler) -> None:
        """Accepted boards never contain duplicate task ids."""
        document = {
            "tasks": [task_document(t) for t in ["a1", "b2", "a1", "b2", "a1"]],
            "logs": [],
        }
        result = accepted(reconciler.reconcile(dump(document)))
        ids = [task.id for task in result.board.tasks]
        assert len(ids) == len(set(ids))


class TestReconcileImport:
    """Tests for the module-level helper."""

    def test_default_reconciler(self) -> None:
        """The helper accepts reconciler options."""
        document = {"tasks": [task_document("x1"), task_document("x1")], "logs": []}
        result = accepted(reconcile_import(dump(document), id_factory=SequentialIds("n")))
        assert result.regenerated == [RegeneratedId(old_id="x1", new_id="n-1")]

    def test_options_reach_reconciler(self) -> None:
        """Actor label and id prefix apply to the repaired task and entry."""
        document = {"tasks": [task_document("x1"), task_document("x1")], "logs": []}
        result = accepted(
            reconcile_import(
                dump(document),
                actor_label="Importer",
                public_id_prefix="tb-",
                id_factory=SequentialIds("n"),
                clock=TickingClock(),
            )
        )
        assert result.board.tasks[1].public_id == make_public_id("n-1", "tb-")
        assert result.board.logs[0].actor_label == "Importer"
        assert result.board.logs[0].timestamp == "2025-01-06T10:00:00.000Z"
