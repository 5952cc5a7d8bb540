"""Audit trail configuration model."""

from pydantic import BaseModel, Field

from taskboard.models import (
    DEFAULT_ACTOR_LABEL,
    DEFAULT_ESTIMATE_MINUTES,
    PUBLIC_ID_PREFIX,
)


class AuditConfig(BaseModel):
    """Identity and defaults applied when recording and normalizing."""

    actor_label: str = Field(
        default=DEFAULT_ACTOR_LABEL,
        min_length=1,
        description="Placeholder identity recorded on every log entry",
    )
    public_id_prefix: str = Field(
        default=PUBLIC_ID_PREFIX, description="Prefix of task display ids"
    )
    default_estimate_minutes: int = Field(
        default=DEFAULT_ESTIMATE_MINUTES,
        ge=1,
        description="Estimate assigned to records that lack one",
    )
