"""
API models and schemas for the Book Catalogue.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IdStrategy(str, Enum):
    """How the store assigns ids to new books."""
    RANDOM = "random"
    SEQUENTIAL = "sequential"


def is_present(value: Any) -> bool:
    """
    Check whether a JSON value counts as supplied.

    ``null``, ``false``, ``""`` and ``0`` are treated as missing. JSON arrays
    and objects are always present, even when empty.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


class NewBook(BaseModel):
    """
    Payload accepted when creating a book.

    Only presence of ``title`` and ``author`` is checked; their types and any
    extra fields are passed through untouched.
    """
    model_config = ConfigDict(extra="allow")

    title: Any = Field(..., description="Book title")
    author: Any = Field(..., description="Book author")

    @field_validator("title", "author")
    @classmethod
    def validate_present(cls, v):
        """Reject falsy title/author values."""
        if not is_present(v):
            raise ValueError("must not be empty")
        return v


class MessageResponse(BaseModel):
    """Plain message response model."""
    message: str = Field(..., description="Message text")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
