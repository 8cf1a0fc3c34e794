from __future__ import annotations

"""
Logging Configuration Model.

Level names accepted on the command line and the immutable settings object
handed to `configure_logging`.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    name: getattr(logging, name)
    for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}
_LEVEL_MAP["WARN"] = logging.WARNING


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the queue-backed logging setup.

    Attributes:
        level: Threshold name (see `_LEVEL_MAP`).
        console: Send records to stderr. stdout is reserved for formatted
            output.
        log_file: Path of an optional rotating diagnostic log.
        max_bytes: Rollover size of the log file.
        backup_count: Rotated files kept next to it.
        console_fmt: Record format on stderr.
        file_fmt: Record format in the log file.
        datefmt: Timestamp format in the log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
