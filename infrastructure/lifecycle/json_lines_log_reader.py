from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from application.ports.lifecycle_log_reader import LifecycleLogReader

logger = structlog.get_logger()


class JsonLinesLogReader(LifecycleLogReader):
    """Read and clear the JSON-lines log files written by ``setup_logging``."""

    def __init__(self, log_file: Path) -> None:
        self.log_file = log_file

    def read_entries(self) -> list[dict[str, Any]]:
        """Return the lifecycle records of the active log file in write order.

        The file also receives every other application and server record, so
        only records flagged ``lifecycle`` are kept. Lines that are not a JSON
        object come back as ``{"raw": line}``.
        """
        if not self.log_file.exists():
            return []

        entries: list[dict[str, Any]] = []
        with self.log_file.open(encoding="utf-8") as f:
            for raw_line in f:
                line = raw_line.strip()
                if not line:
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    entries.append({"raw": line})
                    continue
                if not isinstance(entry, dict):
                    entries.append({"raw": line})
                elif entry.get("lifecycle") is True:
                    entries.append(entry)
        return entries

    def clear(self) -> int:
        """Remove rotated log files and truncate the active one.

        The active file stays in place because the logging handler keeps it open.
        """
        log_dir = self.log_file.parent
        if not log_dir.exists():
            return 0

        removed = 0
        for path in sorted(log_dir.iterdir()):
            if not path.is_file():
                continue
            if path == self.log_file:
                path.write_text("", encoding="utf-8")
            else:
                path.unlink()
            removed += 1

        logger.info("log_files_cleared", log_dir=str(log_dir), removed=removed)
        return removed
