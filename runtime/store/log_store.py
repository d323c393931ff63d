"""LogStore: the file-backed collection of patient message logs.

All records live in a single JSON array in one file (by default
`logs.json` in the current working directory):

    [
      {"timestamp": "...", "originalMessage": "...", "parsedData": {...}},
      ...
    ]

Every operation is a whole-file read-modify-write; there is no index and
no locking. Concurrent writers race and the last one wins.

Read policy differs per operation:
- append() is forgiving: a missing, empty, or unparseable file is treated
  as an empty list, so new data replaces corrupt content.
- list_records() and delete_by_timestamp() are strict: read or parse
  failures raise StorageError.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from exceptions.exceptions import StorageError
from ..models.log_models import LogRecord


logger = logging.getLogger(__name__)

RecordLike = Union[LogRecord, Dict[str, Any]]


class LogStore:
    """File-backed append/filter/list store of LogRecords.

    Parameters
    ----------
    path:
        Location of the JSON file. It is created on the first successful
        write; its parent directory is created if needed.
    """

    def __init__(self, path: Union[str, Path] = "logs.json") -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_records(self) -> List[Any]:
        """Return the stored records verbatim, in insertion order.

        Raises
        ------
        StorageError
            If the file is missing, unreadable, or not valid JSON.
        """
        return self._read_strict()

    def append(self, records: Iterable[RecordLike]) -> None:
        """Append a batch of records at the end of the stored sequence.

        The whole batch is written in one go: either every record lands in
        the file or none do.

        Raises
        ------
        StorageError
            If the file cannot be written.
        """
        new_records = [self._to_dict(r) for r in records]
        logs = self._read_forgiving()
        logs.extend(new_records)
        self._write(logs)
        logger.info("[LOGSTORE] Appended %d record(s) to %s", len(new_records), self.path)

    def delete_by_timestamp(self, timestamp: str) -> int:
        """Remove every record whose timestamp equals `timestamp` exactly.

        The file is rewritten even when nothing matched. Returns the
        number of removed records.

        Raises
        ------
        StorageError
            If the file cannot be read, parsed, or written.
        """
        logs = self._read_strict()
        if not isinstance(logs, list):
            logger.error("[LOGSTORE] %s does not hold a JSON array", self.path)
            raise StorageError("Log file does not hold a JSON array.", path=self.path)

        kept = [entry for entry in logs if not _has_timestamp(entry, timestamp)]
        self._write(kept)

        removed = len(logs) - len(kept)
        logger.info("[LOGSTORE] Deleted %d record(s) with timestamp=%s", removed, timestamp)
        return removed

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_strict(self) -> List[Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            logger.error("[LOGSTORE] Error reading %s: %s", self.path, e)
            raise StorageError(f"Failed to read log file: {e}", path=self.path) from e
        except UnicodeDecodeError as e:
            logger.error("[LOGSTORE] %s is not valid UTF-8: %s", self.path, e)
            raise StorageError(f"Log file is not valid UTF-8: {e}", path=self.path) from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("[LOGSTORE] Error parsing %s: %s", self.path, e)
            raise StorageError(f"Log file is not valid JSON: {e}", path=self.path) from e

    def _read_forgiving(self) -> List[Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                text = f.read()
        except OSError:
            return []
        except UnicodeDecodeError as e:
            logger.warning("[LOGSTORE] %s is not valid UTF-8, starting from empty: %s", self.path, e)
            return []

        if not text:
            return []

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("[LOGSTORE] Failed to parse %s, starting from empty: %s", self.path, e)
            return []

        # Appending needs a list; any other JSON value is treated like corrupt content.
        if not isinstance(data, list):
            logger.warning("[LOGSTORE] %s does not hold a JSON array, starting from empty", self.path)
            return []
        return data

    def _write(self, logs: List[Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(logs, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error("[LOGSTORE] Error writing %s: %s", self.path, e)
            raise StorageError(f"Failed to write log file: {e}", path=self.path) from e

    @staticmethod
    def _to_dict(record: RecordLike) -> Dict[str, Any]:
        if isinstance(record, LogRecord):
            return record.model_dump(mode="json")
        return dict(record)


def _has_timestamp(entry: Any, timestamp: str) -> bool:
    return isinstance(entry, dict) and entry.get("timestamp") == timestamp
