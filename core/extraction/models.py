from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Intent(str, Enum):
    APPOINTMENT_REQUEST = "appointment_request"
    FAQ = "faq"
    MESSAGE_FOR_DOCTOR = "message_for_doctor"


class ParsedData(BaseModel):
    """
    Structured fields extracted from a single patient message.

    `intent`, `name` and `phone` are always present; the rest are only set
    when the patient mentioned them.
    """
    intent: Intent
    name: str
    phone: str
    doctor: Optional[str] = None
    preferred_time: Optional[str] = None
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        """JSON-ready dict without the optional fields that were not extracted."""
        return self.model_dump(mode="json", exclude_none=True)
