"""
Structured logging module using structlog

Features
--------
• Structured logging with automatic context
• Console colour support
• Optional file logging with rotation
• Per-library log levels for noisy dependencies
"""
from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from utils.config import Logging


def _supports_colour() -> bool:
    """True if stderr seems to handle ANSI colour codes."""
    if os.getenv("NO_COLOR"):
        return False
    if sys.platform == "win32" and os.getenv("TERM") != "xterm":
        return False
    return sys.stderr.isatty()


def _level(name: str, default: int) -> int:
    return getattr(logging, (name or "").upper(), default)


def init_logger(cfg: Logging | None = None, *, verbose: bool = False) -> None:
    """Configure structlog with console and optional file output.

    Console output goes to stderr so stdout only carries the agent's results.
    ``verbose`` forces the console level to DEBUG.
    """
    if cfg is None:
        from utils.config import Logging
        cfg = Logging()

    level = logging.DEBUG if verbose else _level(cfg.level, logging.WARNING)

    # Configure standard library logging first
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )
    # Console keeps its own level; the root may be lowered for the file handler
    logging.getLogger().handlers[0].setLevel(level)

    # Configure structlog processors
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=_supports_colour()),
    ]

    structlog.configure(
        processors=processors,  # type: ignore[arg-type]
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for library, library_level in cfg.libraries.items():
        logging.getLogger(library).setLevel(_level(library_level, logging.WARNING))

    # Setup file logging if enabled
    file_cfg = cfg.file
    if file_cfg.enabled:
        path = Path(file_cfg.path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if file_cfg.rotation:
            handler = RotatingFileHandler(
                path,
                maxBytes=file_cfg.max_bytes,
                backupCount=file_cfg.backup_count,
            )
        else:
            handler = logging.FileHandler(path)  # type: ignore[assignment]

        handler.setLevel(_level(file_cfg.level, logging.DEBUG))
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)

        # Add to root logger; the root level must let file records through
        root = logging.getLogger()
        root.addHandler(handler)
        root.setLevel(min(root.level, handler.level))


def get_logger(name: str):
    """Get a structlog logger instance."""
    return structlog.get_logger(name)
