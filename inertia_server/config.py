"""
Configuration Loader.

This module initializes the global configuration object (`config`) used
throughout the adapter. It leverages `yacs` to provide a hierarchical,
dot-accessible configuration structure defined in `inertia_server.core_config`.

Usage:
    from inertia_server.config import config
    print(config.INERTIA.TEMPLATE_NAME)
"""

import logging
from inertia_server.core_config import get_cfg_defaults

# Load default configuration
config = get_cfg_defaults()

# Freeze config to prevent accidental changes during runtime.
config.freeze()

logger = logging.getLogger(__name__)
