# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration file loading and logging setup."""

from linkdb.config.logging import configure_logging
from linkdb.config.settings import (
    CONFIG_FILE_NAME,
    ColorMode,
    ConfigError,
    LinkDbConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ColorMode",
    "ConfigError",
    "LinkDbConfig",
    "configure_logging",
    "find_config",
    "load_config",
]
