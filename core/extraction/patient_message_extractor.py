# core/extraction/patient_message_extractor.py
"""
Patient message extraction for Clinic Relay.

Turns one free-text patient message into a ParsedData object:

    {
        "intent": "appointment_request",
        "name": "Sarah Lim",
        "phone": "0412345678",
        "doctor": "Dr. Patel",             # optional
        "preferred_time": "Monday 9am",    # optional
        "reason": "checkup"                # optional
    }

The extractor delegates the actual work to a backend. The default backend
calls OpenAI with a forced `parse_patient_message` tool call; tests swap in
a fake backend.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from pydantic import ValidationError

from configs.settings import settings
from core.api import openai_client
from exceptions.exceptions import ExtractionError
from .models import ParsedData
from .prompts import PARSE_PATIENT_MESSAGE_TOOL, SYSTEM_PROMPT_RECEPTIONIST


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Backend interface
# ---------------------------------------------------------------------------


class ExtractionBackend(Protocol):
    """
    Abstract backend interface for patient message extraction.

    Implementations must either return a ParsedData or raise
    ExtractionError. They do not know about FastAPI or storage.
    """

    def extract(self, message: str) -> ParsedData:
        ...


class OpenAIExtractionBackend(ExtractionBackend):
    """ExtractionBackend implementation using the project-local openai_client.

    This backend only knows how to formulate the chat request and validate
    the tool call arguments against ParsedData.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: float = 0.0,
        client=None,
    ) -> None:
        self.model = model or settings.openai_model
        self.temperature = temperature
        self.client = client

    def extract(self, message: str) -> ParsedData:
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT_RECEPTIONIST},
            {"role": "user", "content": message},
        ]

        arguments = openai_client.request_tool_call(
            messages,
            PARSE_PATIENT_MESSAGE_TOOL,
            model=self.model,
            temperature=self.temperature,
            client=self.client,
        )

        try:
            return ParsedData(**arguments)
        except ValidationError as e:
            raise ExtractionError(
                "Tool call arguments do not match the patient message schema.",
                details=str(e),
            ) from e


# ---------------------------------------------------------------------------
# PatientMessageExtractor
# ---------------------------------------------------------------------------


class PatientMessageExtractor:
    """
    Entry point used by IntakeAgent:

        parsed = extractor.extract(message)

    Every failure surfaces as ExtractionError, whatever the backend raised.
    """

    def __init__(self, backend: Optional[ExtractionBackend] = None) -> None:
        self.backend = backend or OpenAIExtractionBackend()

    def extract(self, message: str) -> ParsedData:
        try:
            parsed = self.backend.extract(message)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(
                "Extraction backend failed unexpectedly.", details=repr(exc)
            ) from exc

        if not isinstance(parsed, ParsedData):
            raise ExtractionError(
                f"Extraction backend returned {type(parsed).__name__}, expected ParsedData."
            )

        logger.info("[EXTRACT] intent=%s name=%r", parsed.intent.value, parsed.name)
        return parsed
