from __future__ import annotations

"""
Logging Configuration Models.

Holds the three settings the command line controls (severity, stderr
output and an optional log file) together with the fixed record formats
and rotation policy of the file handler.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Rotation policy for --log-file
LOG_MAX_BYTES: int = 1024 * 1024  # 1MB
LOG_BACKUP_COUNT: int = 2

CONSOLE_FORMAT: str = "%(levelname)s | %(message)s"
# Thread name identifies which TreeWorker emitted the record
FILE_FORMAT: str = "%(asctime)s | %(levelname)s | %(threadName)s | %(name)s | %(message)s"
DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings derived from the command line.

    Attributes:
        level: Minimum severity name; unknown names fall back to WARNING.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    def level_number(self) -> int:
        """Numeric logging level for the configured severity name."""
        if not self.level:
            return logging.WARNING
        return _LEVEL_MAP.get(str(self.level).strip().upper(), logging.WARNING)
