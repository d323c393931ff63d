"""
Log-related models for Clinic Relay.

A LogRecord is one stored unit in logs.json:

    {
      "timestamp": "2025-03-03T09:15:02.417Z",
      "originalMessage": "Hi, I'm Sarah ...",
      "parsedData": { "intent": "appointment_request", ... }
    }

Field names are kept camelCase because they are the on-disk and HTTP format.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, Field


def now_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a `Z` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class LogRecord(BaseModel):
    timestamp: str = Field(default_factory=now_timestamp)
    originalMessage: str
    parsedData: Dict[str, Any]
