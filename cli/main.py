#!/usr/bin/env python3
"""
Clinic Relay CLI

Small operational front-end over the same components the HTTP server uses.

Commands:

1) serve
   - Run the FastAPI server (uvicorn) on the configured host/port;
     --reload restarts it when source files change.

2) list
   - Print every stored LogRecord as pretty JSON.

3) delete TIMESTAMP
   - Remove every record whose timestamp matches exactly.

4) generate-test-data
   - Append synthetic appointment requests (10 by default).

5) ingest MESSAGE
   - Send one patient message through OpenAI and store the result.

All commands operate on the log file given by --log-file
(default: CLINIC_RELAY_LOG_FILE or 'logs.json').
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from configs.settings import settings
from core.extraction.patient_message_extractor import PatientMessageExtractor
from runtime.agents.test_data_generator import DEFAULT_COUNT, generate_test_records
from exceptions.exceptions import ClinicRelayError
from runtime.agents.intake_agent import IntakeAgent
from runtime.store.log_store import LogStore


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_serve(log_file: str, host: str, port: int, reload: bool = False) -> None:
    """Run the HTTP server with a LogStore bound to `log_file`.

    With `reload`, uvicorn imports `runtime.api.server:app` in a watched
    subprocess, so the log file is handed over via CLINIC_RELAY_LOG_FILE.
    """
    import uvicorn

    if reload:
        os.environ["CLINIC_RELAY_LOG_FILE"] = log_file
        print(f"[ClinicRelay] Server listening on http://{host}:{port} (auto-reload)")
        print(f"[ClinicRelay] Log file: {log_file}")
        uvicorn.run("runtime.api.server:app", host=host, port=port, reload=True)
        return

    from runtime.api.server import create_app, extractor

    log_store = LogStore(log_file)
    app = create_app(
        log_store=log_store,
        intake_agent=IntakeAgent(log_store=log_store, extractor=extractor),
        dashboard_file=settings.dashboard_file,
        cors_origins=settings.cors_origins,
    )

    print(f"[ClinicRelay] Server listening on http://{host}:{port}")
    print(f"[ClinicRelay] Log file: {log_file}")
    uvicorn.run(app, host=host, port=port)


def cmd_list(log_file: str) -> None:
    records = LogStore(log_file).list_records()
    print(json.dumps(records, indent=2, ensure_ascii=False))


def cmd_delete(log_file: str, timestamp: str) -> None:
    removed = LogStore(log_file).delete_by_timestamp(timestamp)
    print(f"[ClinicRelay] 🗑️ Deleted {removed} record(s) with timestamp {timestamp}")


def cmd_generate_test_data(log_file: str, count: int) -> None:
    records = generate_test_records(count)
    LogStore(log_file).append(records)
    print(f"[ClinicRelay] ✅ {len(records)} test logs generated in {log_file}")


def cmd_ingest(log_file: str, message: str) -> None:
    agent = IntakeAgent(
        log_store=LogStore(log_file),
        extractor=PatientMessageExtractor(),
    )
    parsed = agent.handle_message(message)
    print(json.dumps(parsed.to_dict(), indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Clinic Relay CLI")
    parser.add_argument(
        "--log-file",
        default=str(settings.log_file),
        help="Path to the JSON log file (default: CLINIC_RELAY_LOG_FILE or 'logs.json')",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = subparsers.add_parser("serve", help="Run the HTTP server")
    p_serve.add_argument("--host", default=settings.host, help="Bind address")
    p_serve.add_argument("--port", type=int, default=settings.port, help="Bind port")
    p_serve.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change (development only)",
    )

    # list
    subparsers.add_parser("list", help="Print all stored logs")

    # delete
    p_delete = subparsers.add_parser(
        "delete", help="Delete logs with an exact timestamp"
    )
    p_delete.add_argument("timestamp", help="Exact ISO-8601 timestamp of the record(s)")

    # generate-test-data
    p_generate = subparsers.add_parser(
        "generate-test-data", help="Append synthetic appointment requests"
    )
    p_generate.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help=f"Number of records to generate (default: {DEFAULT_COUNT})",
    )

    # ingest
    p_ingest = subparsers.add_parser(
        "ingest", help="Extract and store a single patient message via OpenAI"
    )
    p_ingest.add_argument("message", help="Free-text patient message")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    log_file: str = args.log_file
    command: str = args.command

    try:
        if command == "serve":
            cmd_serve(
                log_file=log_file,
                host=args.host,
                port=args.port,
                reload=args.reload,
            )
        elif command == "list":
            cmd_list(log_file=log_file)
        elif command == "delete":
            cmd_delete(log_file=log_file, timestamp=args.timestamp)
        elif command == "generate-test-data":
            cmd_generate_test_data(log_file=log_file, count=args.count)
        elif command == "ingest":
            cmd_ingest(log_file=log_file, message=args.message)
        else:
            parser.error(f"Unknown command: {command}")
    except ClinicRelayError as e:
        print(f"[ClinicRelay] ❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
