"""HTTP routes for the Clinic Relay runtime.

Exposes:

- POST   /api/message          -> extract + store one patient message
- GET    /logs                 -> every stored LogRecord
- DELETE /logs/{timestamp}     -> remove records with that exact timestamp
- POST   /generate-test-data   -> append 10 synthetic records
- GET    /                     -> static dashboard
- GET    /healthz              -> liveness probe

Handlers are plain `def` functions so FastAPI runs them in its threadpool;
a slow OpenAI call only holds up its own request.

Failures are reported to clients as a plain-text 500 with a generic
message. The distinction between extraction and storage failures is only
visible in the server log.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, PlainTextResponse

from exceptions.exceptions import ExtractionError, StorageError
from ..agents.test_data_generator import generate_test_records
from ..models.api_models import MessageRequest, MessageResponse
from ..store.log_store import LogStore
from ..agents.intake_agent import IntakeAgent


logger = logging.getLogger(__name__)

# Router for all relay endpoints
router = APIRouter()


# Module-level references, to be initialized by the server.
_LOG_STORE: Optional[LogStore] = None
_INTAKE_AGENT: Optional[IntakeAgent] = None
_DASHBOARD_FILE: Optional[Path] = None


def init_routes(
    log_store: LogStore,
    intake_agent: IntakeAgent,
    dashboard_file: Optional[Path] = None,
) -> None:
    """Initialize module-level references used by the route handlers."""
    global _LOG_STORE, _INTAKE_AGENT, _DASHBOARD_FILE
    _LOG_STORE = log_store
    _INTAKE_AGENT = intake_agent
    _DASHBOARD_FILE = Path(dashboard_file) if dashboard_file else None


def _require_log_store() -> LogStore:
    if _LOG_STORE is None:
        raise HTTPException(
            status_code=500,
            detail="LogStore is not configured on the server.",
        )
    return _LOG_STORE


def _require_intake_agent() -> IntakeAgent:
    if _INTAKE_AGENT is None:
        raise HTTPException(
            status_code=500,
            detail="IntakeAgent is not configured on the server.",
        )
    return _INTAKE_AGENT


@router.post(
    "/api/message",
    response_model=MessageResponse,
    response_model_exclude_none=True,
)
def post_message(request: MessageRequest):
    """Extract structured data from a patient message and log it."""
    agent = _require_intake_agent()

    try:
        parsed = agent.handle_message(request.message)
    except ExtractionError:
        logger.exception("[RELAY] Extraction failed for message=%r", request.message)
        return PlainTextResponse("Error processing message.", status_code=500)
    except StorageError as e:
        logger.error("[RELAY] Error saving log for message=%r: %s", request.message, e)
        return PlainTextResponse("Failed to save log.", status_code=500)

    return MessageResponse(data=parsed)


@router.get("/logs")
def list_logs():
    """Return the whole log file as a JSON array."""
    log_store = _require_log_store()
    try:
        return log_store.list_records()
    except StorageError as e:
        logger.error("[RELAY] Error reading logs: %s", e)
        return PlainTextResponse("Error reading logs", status_code=500)


@router.delete("/logs/{timestamp}")
def delete_log(timestamp: str):
    """Delete every record with this exact timestamp; succeeds if none match."""
    log_store = _require_log_store()
    try:
        removed = log_store.delete_by_timestamp(timestamp)
    except StorageError as e:
        logger.error("[RELAY] Error deleting log timestamp=%s: %s", timestamp, e)
        return PlainTextResponse("Failed to delete log", status_code=500)

    logger.info("[RELAY] Log deleted: %s (%d record(s))", timestamp, removed)
    return PlainTextResponse("OK")


@router.post("/generate-test-data")
def generate_test_data():
    """Append a batch of synthetic appointment requests."""
    log_store = _require_log_store()
    records = generate_test_records()
    try:
        log_store.append(records)
    except StorageError as e:
        logger.error("[RELAY] Failed to write test logs: %s", e)
        return PlainTextResponse("Write error", status_code=500)

    logger.info("[RELAY] %d test logs generated.", len(records))
    return PlainTextResponse("OK")


@router.get("/")
def dashboard():
    """Serve the static dashboard page."""
    if _DASHBOARD_FILE is None or not _DASHBOARD_FILE.is_file():
        raise HTTPException(status_code=404, detail="Dashboard not found")
    return FileResponse(_DASHBOARD_FILE, media_type="text/html")


# --------------------------------------------------------
# Endpoint: GET /healthz
# --------------------------------------------------------
@router.get("/healthz")
def health_check():
    """
    Simple health check endpoint for uptime monitoring.
    """
    return {"status": "ok"}
