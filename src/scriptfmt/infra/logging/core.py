from __future__ import annotations

"""
Logging Bootstrap.

Installs one QueueHandler on the root logger and lets a QueueListener thread
feed the real sinks, so a slow log file never stalls a formatting call. The
setup is idempotent: state is kept as attributes on the root logger and only
handlers tagged as ours are ever removed.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from scriptfmt.infra.fs import get_user_data_dir
from scriptfmt.infra.logging.config import _LEVEL_MAP, LoggingConfig
from scriptfmt.infra.logging.handlers import _is_our_handler, _tag_handler, build_sinks

_CONFIGURED_FLAG_ATTR: str = "_scriptfmt_configured"
_QUEUE_LISTENER_ATTR: str = "_scriptfmt_queue_listener"

_EMERGENCY_FMT = "CRITICAL FALLBACK | %(levelname)s | %(message)s"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route the root logger through a queue to the sinks named in `cfg`.

    Args:
        cfg: Levels, sinks and formats to install.
        force: Tear down and rebuild an existing scriptfmt setup.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level = _parse_level(cfg.level)
        _teardown(root)
        root.setLevel(level)

        sinks = build_sinks(cfg, level)
        if sinks:
            _start_queue(root, sinks)
    except Exception as e:
        _teardown(root)
        emergency = logging.StreamHandler(sys.stderr)
        emergency.setFormatter(logging.Formatter(_EMERGENCY_FMT))
        root.addHandler(_tag_handler(emergency))
        root.warning(f"Logging setup failed ({e}). Switched to emergency console.")

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_default_log_path(file_name: str = "scriptfmt.log") -> str:
    """Path of the persistent diagnostic log inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    return _LEVEL_MAP.get(str(level or "").strip().upper(), logging.INFO)


def _start_queue(root: logging.Logger, sinks: List[logging.Handler]) -> None:
    records: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(_tag_handler(QueueHandler(records)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    atexit.register(_safe_stop_listener, listener)


def _teardown(root: logging.Logger) -> None:
    """Stop our listener and close every handler tagged as ours."""
    _safe_stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for handler in [h for h in root.handlers if _is_our_handler(h)]:
        root.removeHandler(handler)
        handler.close()


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    # QueueListener.stop() fails on a listener whose thread is already gone
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
