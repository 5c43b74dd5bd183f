from __future__ import annotations

from .config import LoggingConfig
from .core import (
    configure_logging,
    get_logger,
    level_from_name,
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "level_from_name",
]
