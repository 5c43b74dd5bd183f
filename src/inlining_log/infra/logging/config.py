from __future__ import annotations

"""
Logging Configuration Models.

Settings for the diagnostic output of a compilation that records inlining
decisions. The compiler usually runs quietly, so the root stays at WARNING
while the decision loggers can be opened up on their own.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

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
    Logging setup for one compiler run.

    Attributes:
        level: Root level, applied to every handler we install.
        decision_level: Level for the `inlining_log` loggers alone. DEBUG
            traces every recorded decision; None leaves them inheriting.
        console: Write to stderr.
        log_file: Optional path of a rotating decision trace file.
        max_bytes: Rollover threshold; a single compilation trace rarely
            exceeds a few hundred kilobytes.
        backup_count: Traces of earlier compilations kept after rollover.
        console_fmt: Terminal format, phase tags are already in the message.
        file_fmt: File format, with milliseconds to order decisions across runs.
        datefmt: Timestamp format used by `file_fmt`.
    """
    level: str = "WARNING"
    decision_level: Optional[str] = None
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 5

    console_fmt: str = "inlining | %(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s | %(message)s"
    datefmt: str = "%H:%M:%S"
