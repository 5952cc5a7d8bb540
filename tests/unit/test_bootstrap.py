"""Tests for bootstrap."""

import json
from pathlib import Path

import pytest

from taskboard.board import BoardService
from taskboard.bootstrap import bootstrap
from taskboard.config import Settings
from taskboard.config.models import ObservabilityConfig, StorageConfig
from taskboard.stores import InMemoryBoardStore
from tests.factories import task_document


class TestBootstrap:
    """Tests for the bootstrap entry point."""

    @pytest.mark.asyncio
    async def test_loads_existing_board(self, settings: Settings) -> None:
        """The returned service holds the stored board."""
        document = {"tasks": [task_document("t1")], "logs": []}
        store = InMemoryBoardStore({"test-board": json.dumps(document)})

        service = await bootstrap(settings, store)

        assert isinstance(service, BoardService)
        assert [task.id for task in service.board.tasks] == ["t1"]

    @pytest.mark.asyncio
    async def test_builds_store_from_settings(self, tmp_path: Path) -> None:
        """Without a store the configured file backend is used."""
        settings = Settings(
            storage=StorageConfig(backend="file", path=str(tmp_path), key="board"),
            observability=ObservabilityConfig(log_format="console"),
        )
        service = await bootstrap(settings)
        assert service.board.tasks == []

        await service.save(service.board)
        assert json.loads((tmp_path / "board.json").read_text()) == {"tasks": [], "logs": []}
