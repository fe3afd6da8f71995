"""
Centralized logging configuration for vamsa-gedcom.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Console logging (stderr) that respects the configured debug flag.
* Optional master log file (``logging.to_file``) plus optional per-module
  logs (``logging.per_module_files``) and rotation (``logging.rotate``),
  all driven by ``config/vamsa_gedcom.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from vamsa_gedcom.config import get_config
from vamsa_gedcom.utils.pathing import project_root

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "vamsa_gedcom"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cache so handlers are only created once per module
_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False
_per_module_files: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    cfg = get_config()

    log_dir_cfg = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(log_dir_cfg)
    if not log_dir.is_absolute():
        log_dir = project_root() / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _rotate_logs, _per_module_files

    if _base_configured:
        return logging.getLogger(BASE_LOGGER_NAME)

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _per_module_files = bool(cfg.logging.get("per_module_files", False))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    if cfg.logging.get("to_file", False):
        master_path = _ensure_log_dir() / cfg.logging.get("file", "vamsa_gedcom.log")
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else base_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    filename = f"{module_name.replace('.', '_')}.log"
    path = _ensure_log_dir() / filename

    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Names outside the ``vamsa_gedcom`` namespace are nested under it so
      they share the base console/master handlers.
    * With ``logging.per_module_files`` each module also gets
      ``logs/<module>.log``.
    * The debug flag in ``config/vamsa_gedcom.yml`` forces DEBUG output.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if _per_module_files and not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
