"""
Configuration module for the Design System button library.
Contains app meta, window settings, environment overrides and logging.
"""
import logging
import os
import sys

# ==============================================================================
#  APP META
# ==============================================================================
APP_NAME = "Design System"
APP_VERSION = "1.0.0"

# ==============================================================================
#  WINDOW
# ==============================================================================
WINDOW_TITLE = "Button Library"
WINDOW_GEOMETRY = "520x760"
WINDOW_MIN_SIZE = (360, 480)

# ==============================================================================
#  ENVIRONMENT OVERRIDES
# ==============================================================================
APPEARANCE_ENV = "DESIGN_SYSTEM_APPEARANCE"
LOG_LEVEL_ENV = "DESIGN_SYSTEM_LOG_LEVEL"

APPEARANCE_MODES = ("light", "dark", "system")
DEFAULT_APPEARANCE = "light"
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

_ROOT_LOGGER_NAME = "design_system"
_configured = False


def get_log_level() -> int:
    """Resolve the log level from the environment (falls back to INFO)."""
    raw = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        return logging.INFO
    return level


def _configure_root():
    """Attach the stream handler once for the design_system namespace."""
    global _configured
    if _configured:
        return
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(get_log_level())
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger under the design_system namespace.

    Usage:
        log = get_logger("styles")
        log.info("Resolved style")
    """
    _configure_root()
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


log = get_logger("config")


def get_appearance_mode() -> str:
    """
    Appearance mode for customtkinter, read from DESIGN_SYSTEM_APPEARANCE.

    Unknown values fall back to the default with a warning.
    """
    raw = os.environ.get(APPEARANCE_ENV, "").strip().lower()
    if not raw:
        return DEFAULT_APPEARANCE
    if raw not in APPEARANCE_MODES:
        log.warning(f"Unknown appearance mode {raw!r}, using {DEFAULT_APPEARANCE!r}")
        return DEFAULT_APPEARANCE
    return raw
