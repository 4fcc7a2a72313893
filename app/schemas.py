from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

class IssueStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"

# Messages shown to the user instead of pydantic's defaults, keyed by
# (field, error type).
REQUIRED_MESSAGES = {
    "title": "An Issue Title is required.",
    "description": "An Issue Description is required.",
}
_REQUIRED_ERRORS = {"missing", "string_too_short"}

class IssueCreate(BaseModel):
    """Shared schema for a new issue, used by the form and by the API."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)

    @field_validator("title", "description")
    @classmethod
    def reject_null_characters(cls, value: str) -> str:
        # PostgreSQL text columns cannot store NUL
        if "\x00" in value:
            raise ValueError("Null characters are not allowed.")
        return value

class IssueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    status: IssueStatus
    created_at: datetime
    updated_at: datetime


def _message(error: dict[str, Any]) -> str:
    loc = error.get("loc") or ()
    if len(loc) == 1 and loc[0] in REQUIRED_MESSAGES and error["type"] in _REQUIRED_ERRORS:
        return REQUIRED_MESSAGES[loc[0]]
    return error["msg"]


def format_errors(exc: ValidationError) -> dict[str, Any]:
    """
    Turn a ValidationError into a nested error tree.

    Every node carries an ``_errors`` list; field nodes hang off the root
    under the field name, e.g.::

        {"_errors": [], "title": {"_errors": ["An Issue Title is required."]}}
    """
    tree: dict[str, Any] = {"_errors": []}
    for error in exc.errors():
        node = tree
        for part in error.get("loc") or ():
            node = node.setdefault(str(part), {"_errors": []})
        node["_errors"].append(_message(error))
    return tree


def first_errors(tree: dict[str, Any]) -> dict[str, str]:
    """Flatten an error tree to the first message of each top-level field."""
    return {
        field: node["_errors"][0]
        for field, node in tree.items()
        if field != "_errors" and node.get("_errors")
    }
