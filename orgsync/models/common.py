"""
Common response models and utilities.

Shared response shapes and validation helpers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class OrganizationRef(BaseModel):
    """Minimal organization reference embedded in other resources."""

    id: int
    name: str


def strip_required(value: str, message: str) -> str:
    """Strip surrounding whitespace and reject an empty result."""
    value = value.strip()
    if not value:
        raise ValueError(message)
    return value
