"""Structured logging configuration using structlog.

Provides JSON logging for machine consumption and console logging for
development, with contextvars binding and redaction of evaluator notes.
"""

import re
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

# Free-text evaluation fields and secret-like keys (O(1) lookup)
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "observation",
    "comment",
    "description",
    "password",
    "secret",
    "token",
    "api_key",
    "authorization",
})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


class SensitiveFieldRedactor:
    """Processor that redacts free-text task content from log events.

    Keys named in SENSITIVE_KEYS are replaced wholesale; remaining string
    values have e-mail addresses masked.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Redact sensitive values from the event dictionary."""
        return cast(EventDict, self._redact(event_dict))

    def _redact(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            else:
                result[key] = self._redact_value(value)
        return result

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self._redact(value)
        if isinstance(value, list):
            return [self._redact_value(item) for item in value]
        if isinstance(value, str):
            return EMAIL_PATTERN.sub("[EMAIL]", value)
        return value


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_sensitive: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format - "json" or "console"
        redact_sensitive: Whether to redact free-text task content
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_sensitive:
        processors.append(SensitiveFieldRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level_map = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    level_num = level_map.get(level.upper(), 20)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        A bound structlog logger
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
