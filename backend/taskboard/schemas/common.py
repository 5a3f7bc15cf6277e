"""Common Schemas — small envelopes shared by member and task routes."""

from pydantic import BaseModel


class IdResponse(BaseModel):
    """Identifier returned by create/update/complete operations."""
    id: int


class MessageResponse(BaseModel):
    """Confirmation returned by delete operations."""
    message: str


class OwnerResponse(BaseModel):
    identity: str
