"""Base model and shared field types for board entities."""

from datetime import UTC, datetime
from typing import Annotated
from uuid import uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


def to_iso(moment: datetime) -> str:
    """Format a datetime the way the board document stores timestamps."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Return current UTC time as an ISO-8601 string."""
    return to_iso(utc_now())


def new_id() -> str:
    """Generate a globally unique identifier."""
    return str(uuid4())


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, requiring an explicit offset.

    Raises:
        ValueError: If the string is not ISO-8601 or has no offset
    """
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        raise ValueError("timestamp must include a UTC offset")
    return moment


def _check_timestamp(value: str) -> str:
    try:
        parse_timestamp(value)
    except ValueError as e:
        raise ValueError(f"invalid ISO-8601 timestamp {value!r}") from e
    return value


# Kept as the original string so hashes and exports stay byte-stable
IsoTimestamp = Annotated[str, AfterValidator(_check_timestamp)]


class BoardModel(BaseModel):
    """Base for all board document entities.

    Entities are immutable values; mutations produce copies via
    ``model_copy``. Attribute names are snake_case in Python and
    camelCase in the persisted document.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """Serialize to the camelCase JSON-compatible document shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
