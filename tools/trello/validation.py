"""
Argument models for Trello tools.

Every tool call arrives as an untrusted dict. Each operation parses it into a
pydantic model before anything touches the network.
"""

import math
from datetime import datetime
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, Field, PlainValidator,
    ValidationError, ValidationInfo, field_validator,
)

TRELLO_ID_PATTERN = r"^[a-f0-9]{24}$"

# Trello's limit for names, descriptions and comments
MAX_TEXT_LENGTH = 16384

ISO_DATETIME_PATTERN = (
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})$"
)

# Member lookups take an id, a username, or "me"
MEMBER_REF_PATTERN = r"^([a-f0-9]{24}|me|[a-z0-9_]{3,100})$"

POSITION_TOKENS = ("top", "bottom")


def _check_datetime(value: str) -> str:
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("not a valid ISO 8601 date-time") from None
    return value


def _check_position(value: Any) -> Any:
    if isinstance(value, str):
        if value in POSITION_TOKENS:
            return value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isfinite(value) and value >= 0:
            return value
    raise ValueError("must be 'top', 'bottom', or a non-negative number")


TrelloId = Annotated[str, Field(pattern=TRELLO_ID_PATTERN)]
LongText = Annotated[str, Field(min_length=1, max_length=MAX_TEXT_LENGTH)]
OptionalText = Annotated[str, Field(max_length=MAX_TEXT_LENGTH)]
IsoDateTime = Annotated[str, Field(pattern=ISO_DATETIME_PATTERN), AfterValidator(_check_datetime)]
MemberRef = Annotated[str, Field(pattern=MEMBER_REF_PATTERN)]
ResultLimit = Annotated[int, Field(ge=1, le=1000, strict=True)]
Flag = Annotated[bool, Field(strict=True)]
StatusFilter = Literal["open", "closed", "all"]
Position = Annotated[Union[str, int, float], PlainValidator(_check_position)]


class ToolArguments(BaseModel):
    """
    Base for every tool's arguments: the two credentials plus strictness rules.

    Optional fields default to None but reject an explicit null unless listed
    in ``nullable_fields``. Whether a field was supplied at all is read back
    through ``model_dump(exclude_unset=True)``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    apiKey: str = Field(min_length=1)
    token: str = Field(min_length=1)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("must not be null")
        return value

    def supplied(self, *names: str) -> dict[str, Any]:
        """Return the named fields the caller actually sent, nulls included."""
        return self.model_dump(include=set(names), exclude_unset=True)


def format_validation_error(error: ValidationError) -> str:
    """Join every violated field and its reason into one message."""
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{location}: {err['msg']}")
    return "Invalid arguments: " + "; ".join(problems)
