"""Storage backend configuration model."""

from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory", "file"]


class StorageConfig(BaseModel):
    """Where the board document is persisted."""

    backend: BackendType = Field(default="file", description="Backend type")
    path: str = Field(
        default="data", description="Directory for the file backend"
    )
    key: str = Field(
        default="task-board",
        min_length=1,
        description="Storage key of the board document",
    )
