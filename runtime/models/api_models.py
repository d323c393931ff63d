"""
HTTP request/response models for the Clinic Relay API.
"""

from pydantic import BaseModel

from core.extraction.models import ParsedData


class MessageRequest(BaseModel):
    message: str


class MessageResponse(BaseModel):
    """Response of POST /api/message; `data` omits unset optional fields."""
    data: ParsedData
