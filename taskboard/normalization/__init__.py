"""Normalization of legacy and loosely-typed board records."""

from taskboard.normalization.field_map import (
    LOG_FIELD_RENAMES,
    STATUS_ALIASES,
    TASK_FIELD_RENAMES,
    migrate_document,
    migrate_log_record,
    migrate_task_record,
)
from taskboard.normalization.normalizer import (
    ModelNormalizer,
    coerce_estimate,
    coerce_score,
    coerce_tags,
)

__all__ = [
    "LOG_FIELD_RENAMES",
    "ModelNormalizer",
    "STATUS_ALIASES",
    "TASK_FIELD_RENAMES",
    "coerce_estimate",
    "coerce_score",
    "coerce_tags",
    "migrate_document",
    "migrate_log_record",
    "migrate_task_record",
]
