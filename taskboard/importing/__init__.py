"""Import of external board documents."""

from taskboard.importing.models import (
    ImportAccepted,
    ImportRejected,
    ImportResult,
    RegeneratedId,
)
from taskboard.importing.reconciler import ImportReconciler, reconcile_import
from taskboard.importing.validation import (
    PARSE_ERROR_MESSAGE,
    format_error,
    parse_document,
    validate_document,
)

__all__ = [
    "ImportAccepted",
    "ImportReconciler",
    "ImportRejected",
    "ImportResult",
    "PARSE_ERROR_MESSAGE",
    "RegeneratedId",
    "format_error",
    "parse_document",
    "reconcile_import",
    "validate_document",
]
