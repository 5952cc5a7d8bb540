"""Configuration section models."""

from taskboard.config.models.audit import AuditConfig
from taskboard.config.models.observability import LogLevel, ObservabilityConfig
from taskboard.config.models.storage import BackendType, StorageConfig

__all__ = [
    "AuditConfig",
    "BackendType",
    "LogLevel",
    "ObservabilityConfig",
    "StorageConfig",
]
