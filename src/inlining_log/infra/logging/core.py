from __future__ import annotations

"""
Logging Core Orchestrator.

Idempotent setup of the root logger. Records are routed through a
QueueHandler so that file output never runs on the compiling thread.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from inlining_log.infra.logging.config import _LEVEL_MAP, LoggingConfig
from inlining_log.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_inlining_log_configured"
_QUEUE_LISTENER_ATTR: str = "_inlining_log_queue_listener"
_PACKAGE_LOGGER: str = "inlining_log"

FALLBACK_FMT = "CRITICAL FALLBACK | %(levelname)s | %(message)s"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, unless `force` is given.

    Console and file handlers hang off a QueueListener; only a single tagged
    QueueHandler is attached to the root logger. Handlers that were not
    created here are left untouched. If setup fails, a single tagged stderr
    handler with the CRITICAL FALLBACK format is installed instead.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, tear down our handlers and configure again.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = level_from_name(cfg.level)
        root.setLevel(level_int)
        _apply_decision_level(cfg.decision_level)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            sh = logging.StreamHandler(sys.stderr)
            sh.setLevel(level_int)
            sh.setFormatter(logging.Formatter(cfg.console_fmt))
            _tag_handler(sh)
            handlers_list.append(sh)

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            setattr(root, _CONFIGURED_FLAG_ATTR, True)
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()
        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)

        return root

    # Fall back to a plain console handler if the infrastructure fails
    except Exception:
        return _install_fallback_console(root)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def level_from_name(level: str) -> int:
    """Convert a level name to its numeric constant (INFO when unknown)."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()


def _apply_decision_level(decision_level: Optional[str]) -> None:
    """Set the level of the package loggers independently of the root."""
    if decision_level:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(level_from_name(decision_level))


def _install_fallback_console(root: logging.Logger) -> logging.Logger:
    """Replace our handlers with a single direct stderr handler."""
    root.setLevel(logging.INFO)
    _remove_our_handlers(root)
    _stop_existing_listener(root)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(FALLBACK_FMT))
    _tag_handler(sh)
    root.addHandler(sh)

    root.warning("Diagnostic logging setup failed. Switched to emergency console.")
    return root
