"""
Custom exceptions for Clinic Relay.

These exceptions are intentionally simple and descriptive.
They are used across:

  - core/api/ and core/extraction/
  - runtime/store/
  - runtime/agents/ and runtime/api/

Placing them at the project root (exceptions/) avoids circular imports
and keeps exception types consistent across modules.
"""


class ClinicRelayError(Exception):
    """Base class for errors raised while relaying a patient message."""


class ExtractionError(ClinicRelayError):
    """
    Raised when the Extraction Service (OpenAI) cannot turn a message into
    structured data: network/API failure, missing tool call, invalid JSON
    arguments, or arguments that do not match the patient-message schema.
    """

    def __init__(self, message, details=None):
        self.details = details
        msg = message if details is None else f"{message}\nDetails: {details}"
        super().__init__(msg)


class StorageError(ClinicRelayError):
    """
    Raised when the log file cannot be read, parsed, or written.

    The offending path is kept on the exception for server-side logging.
    """

    def __init__(self, message, path=None):
        self.path = path
        msg = message if path is None else f"{message} (path: {path})"
        super().__init__(msg)
