from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Factories for the sinks that sit behind the queue listener, plus a tag that
lets scriptfmt tell its own handlers apart from ones installed by a host
program or by pytest.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from scriptfmt.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_scriptfmt_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_sinks(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    """
    Create the tagged handlers requested by the configuration.

    Args:
        cfg: Logging configuration.
        level: Numeric threshold applied to every sink.

    Returns:
        List[logging.Handler]: Console and/or file handlers; empty when the
                               configuration enables neither or the file
                               cannot be opened.
    """
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        sinks.append(_tag_handler(console))

    if cfg.log_file:
        rotating = _open_rotating_file(cfg)
        if rotating is not None:
            rotating.setLevel(level)
            rotating.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
            sinks.append(_tag_handler(rotating))

    return sinks


def _open_rotating_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Open the size-rotated log file, warning on stderr if that is impossible."""
    try:
        folder = os.path.dirname(os.path.abspath(cfg.log_file))
        if folder:
            os.makedirs(folder, exist_ok=True)
        return RotatingFileHandler(
            cfg.log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None
