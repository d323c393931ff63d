"""IntakeAgent implementation.

Responsible for one ingestion request:
- ask the PatientMessageExtractor for ParsedData
- build a LogRecord stamped with the current time
- append it to the LogStore as a single-record batch
- return the ParsedData

Failure paths never append anything. Extraction failures raise
ExtractionError and storage failures raise StorageError; the HTTP layer
reports both the same way but logs them separately.
"""

import logging

from core.extraction.models import ParsedData
from core.extraction.patient_message_extractor import PatientMessageExtractor
from ..models.log_models import LogRecord, now_timestamp
from ..store.log_store import LogStore


logger = logging.getLogger(__name__)


class IntakeAgent:
    """Message ingestion logic for Clinic Relay.

    Parameters
    ----------
    log_store:
        Store that receives one LogRecord per successful extraction.
    extractor:
        Component that turns a message into ParsedData. Expected to expose
        `extract(message) -> ParsedData` and raise ExtractionError on failure.
    """

    def __init__(self, log_store: LogStore, extractor: PatientMessageExtractor) -> None:
        self.log_store = log_store
        self.extractor = extractor

    def handle_message(self, message: str) -> ParsedData:
        logger.info("[INTAKE] Received message: %r", message)

        # Raises ExtractionError; nothing has been stored yet.
        parsed = self.extractor.extract(message)

        record = LogRecord(
            timestamp=now_timestamp(),
            originalMessage=message,
            parsedData=parsed.to_dict(),
        )
        # Raises StorageError.
        self.log_store.append([record])

        logger.info("[INTAKE] Log saved with timestamp=%s", record.timestamp)
        return parsed
