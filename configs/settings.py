from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()

# Directory that holds the `runtime` package; used for package-relative defaults.
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings:
    """
    Central configuration for Clinic Relay.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties.
    """

    def __init__(self) -> None:
        # OpenAI / model configuration
        self._openai_api_key = os.getenv("OPENAI_API_KEY")
        self._openai_base_url = os.getenv("OPENAI_BASE_URL") or None
        self._openai_model = os.getenv("CLINIC_RELAY_OPENAI_MODEL", "gpt-4o")

        # Persistence and static files
        self._log_file = Path(os.getenv("CLINIC_RELAY_LOG_FILE", "logs.json"))
        self._dashboard_file = Path(
            os.getenv(
                "CLINIC_RELAY_DASHBOARD_FILE",
                str(PROJECT_ROOT / "runtime" / "static" / "dashboard.html"),
            )
        )

        # HTTP server
        self._cors_origins = os.getenv("CLINIC_RELAY_CORS_ORIGINS", "*")
        self._host = os.getenv("CLINIC_RELAY_HOST", "127.0.0.1")
        self._port = int(os.getenv("CLINIC_RELAY_PORT", "3001"))

    # ------------------------------------------------------------------
    # OpenAI / model settings
    # ------------------------------------------------------------------

    @property
    def openai_api_key(self) -> str:
        if not self._openai_api_key:
            raise RuntimeError(
                "OPENAI_API_KEY is not set. Please export it in your environment "
                "or define it in a .env file."
            )
        return self._openai_api_key

    @property
    def openai_base_url(self) -> Optional[str]:
        return self._openai_base_url

    @property
    def openai_model(self) -> str:
        return self._openai_model

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def log_file(self) -> Path:
        return self._log_file

    @property
    def dashboard_file(self) -> Path:
        return self._dashboard_file

    # ------------------------------------------------------------------
    # Server
    # ------------------------------------------------------------------

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self._cors_origins.split(",") if o.strip()]

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port


settings = Settings()
