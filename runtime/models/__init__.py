"""
Pydantic / datamodels used by the Clinic Relay runtime.

Split into:
- log_models: LogRecord + timestamp helper
- api_models: HTTP request/response schemas
"""
