"""
Core Configuration Definitions.

This module defines the default structure and values for the adapter's
configuration system using `yacs`. It serves as the single source of truth
for all configurable parameters.

Configuration is organized into sections:
- INERTIA: Protocol settings (root template, asset version, manifest).
- LOGGING: Log level and optional rotating log file.
- SERVER: Bind address for the bundled demo application.
"""

import os
from pathlib import Path
from yacs.config import CfgNode as CN  # type: ignore[import-untyped]


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


_C = CN()

# -----------------------------------------------------------------------------
# Protocol Configuration
# -----------------------------------------------------------------------------
_C.INERTIA = CN()
# Root template rendered for document (non-protocol) replies
_C.INERTIA.TEMPLATE_NAME = os.environ.get("INERTIA_TEMPLATE_NAME", "app")

# Extension appended to TEMPLATE_NAME when it has none
_C.INERTIA.TEMPLATE_EXTENSION = ".html"

# Directory holding the root template
_C.INERTIA.TEMPLATE_DIR = os.environ.get(
    "INERTIA_TEMPLATE_DIR",
    str(Path(__file__).parent / "assets" / "templates"),
)

# Asset version token; must change whenever deployed client assets change
_C.INERTIA.VERSION = os.environ.get("INERTIA_ASSET_VERSION", "1")

# Optional JSON build manifest exposed to the root template
_C.INERTIA.MANIFEST_PATH = os.environ.get("INERTIA_MANIFEST_PATH", "")

# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
_C.LOGGING = CN()
_C.LOGGING.LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
# Empty string disables the file handler
_C.LOGGING.FILE = os.environ.get("LOG_FILE", "")
_C.LOGGING.MAX_BYTES = _env_int("LOG_MAX_BYTES", 5 * 1024 * 1024)
_C.LOGGING.BACKUP_COUNT = _env_int("LOG_BACKUP_COUNT", 5)

# -----------------------------------------------------------------------------
# Demo Server Configuration
# -----------------------------------------------------------------------------
_C.SERVER = CN()
_C.SERVER.HOST = os.environ.get("INERTIA_SERVER_HOST", "127.0.0.1")
_C.SERVER.PORT = _env_int("INERTIA_SERVER_PORT", 8000)


def get_cfg_defaults():
    """
    Get a yacs CfgNode object with default values.
    Returns a clone so callers never mutate the module defaults.
    """
    return _C.clone()
