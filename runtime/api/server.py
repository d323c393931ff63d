"""
FastAPI application entry point for the Clinic Relay runtime.

Responsibilities:
- create the FastAPI app
- construct shared singletons (LogStore, PatientMessageExtractor, IntakeAgent)
- include the relay routes

Start it with:

    uvicorn runtime.api.server:app --port 3001
"""

from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from configs.settings import settings
from core.extraction.patient_message_extractor import (
    OpenAIExtractionBackend,
    PatientMessageExtractor,
)
from runtime.agents.intake_agent import IntakeAgent
from runtime.store.log_store import LogStore
from . import log_routes


def create_app(
    log_store: LogStore,
    intake_agent: IntakeAgent,
    dashboard_file: Optional[Path] = None,
    cors_origins: Optional[List[str]] = None,
) -> FastAPI:
    """Build a FastAPI app wired to the given store and agent."""
    app = FastAPI(title="Clinic Relay")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Initialize the router module with our shared objects, then include it.
    log_routes.init_routes(
        log_store=log_store,
        intake_agent=intake_agent,
        dashboard_file=dashboard_file,
    )
    app.include_router(log_routes.router)
    return app


# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

# Single JSON file holding every LogRecord (logs.json by default).
log_store = LogStore(settings.log_file)

# Extractor backed by OpenAI; the client itself is created on first request.
extractor = PatientMessageExtractor(
    backend=OpenAIExtractionBackend(
        model=settings.openai_model,
        temperature=0.0,
    )
)

intake_agent = IntakeAgent(log_store=log_store, extractor=extractor)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

app = create_app(
    log_store=log_store,
    intake_agent=intake_agent,
    dashboard_file=settings.dashboard_file,
    cors_origins=settings.cors_origins,
)
