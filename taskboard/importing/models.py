"""Import result models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from taskboard.models import BoardData


class RegeneratedId(BaseModel):
    """A duplicate task id replaced during import."""

    model_config = ConfigDict(frozen=True)

    old_id: str = Field(..., description="Id as it appeared in the document")
    new_id: str = Field(..., description="Freshly generated replacement")


class ImportAccepted(BaseModel):
    """Import succeeded; the board fully replaces the caller's state."""

    model_config = ConfigDict(frozen=True)

    status: Literal["accepted"] = "accepted"
    board: BoardData = Field(..., description="Reconciled board")
    regenerated: list[RegeneratedId] = Field(
        default_factory=list, description="Id substitutions in encounter order"
    )

    @property
    def ok(self) -> bool:
        return True


class ImportRejected(BaseModel):
    """Import failed; nothing from the document may be used."""

    model_config = ConfigDict(frozen=True)

    status: Literal["rejected"] = "rejected"
    errors: list[str] = Field(..., description="Itemized error messages")

    @property
    def ok(self) -> bool:
        return False


ImportResult = ImportAccepted | ImportRejected
