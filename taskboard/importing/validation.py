"""Parsing and schema validation of import documents."""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from taskboard.errors import ImportParseError, ImportValidationError
from taskboard.models import BoardData
from taskboard.normalization import migrate_document

PARSE_ERROR_MESSAGE = "Import file is not valid JSON."
ROOT_PATH = "(root)"


def format_error(error: ErrorDetails) -> str:
    """Render one pydantic error as "<dotted.path>: <message>"."""
    path = ".".join(str(part) for part in error["loc"]) or ROOT_PATH
    return f"{path}: {error['msg']}"


def parse_document(raw_text: str | bytes) -> Any:
    """Parse raw import text as JSON.

    Raises:
        ImportParseError: If the text is not valid JSON
    """
    try:
        return json.loads(raw_text)
    except ValueError as e:
        raise ImportParseError(PARSE_ERROR_MESSAGE) from e


def validate_document(document: Any) -> BoardData:
    """Validate a parsed document against the full board schema.

    Legacy field names are mapped first; every remaining violation is
    reported, none are repaired.

    Raises:
        ImportValidationError: With one message per violation
    """
    if isinstance(document, Mapping):
        document = migrate_document(document)
    try:
        return BoardData.model_validate(document)
    except ValidationError as e:
        raise ImportValidationError([format_error(err) for err in e.errors()]) from e
