"""
Runtime package for the Clinic Relay server.

This package contains:
- API layer (FastAPI server + routes)
- Agents (message intake)
- Stores (the logs.json LogStore)
- Models (Pydantic models for log records and requests)
"""
