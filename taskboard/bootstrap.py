"""Bootstrap module for wiring a board service from configuration.

Handles:
- Loading configuration from TOML files and TASKBOARD_* variables
- Configuring structured logging
- Creating the configured board store
- Loading the persisted board

Example usage:

    from taskboard.bootstrap import bootstrap

    service = await bootstrap()
    entry = await service.create_task(Task.new("Patrol Perimeter"))
"""

from taskboard.board import BoardService
from taskboard.config import Settings, get_settings
from taskboard.observability.logging import get_logger, setup_logging
from taskboard.stores import BoardStore, create_board_store

logger = get_logger(__name__)


async def bootstrap(
    settings: Settings | None = None,
    store: BoardStore | None = None,
) -> BoardService:
    """Build a BoardService and load the persisted board.

    Args:
        settings: Settings to use (loaded from config when omitted)
        store: Store handle to use (built from settings when omitted)

    Returns:
        A service holding the loaded board
    """
    settings = settings if settings is not None else get_settings()
    obs = settings.observability
    setup_logging(
        level=obs.log_level,
        format=obs.log_format,
        redact_sensitive=obs.redact_sensitive,
    )

    if store is None:
        store = create_board_store(settings.storage)

    service = BoardService(store, settings)
    await service.load()
    logger.info(
        "taskboard_ready",
        app_name=settings.app_name,
        backend=settings.storage.backend,
        key=settings.storage.key,
    )
    return service
