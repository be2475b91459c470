# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Optional YAML configuration for the linkdb checker."""

import enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".linkdb.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class ColorMode(enum.Enum):
    """When to colour console output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class LinkDbConfig(BaseModel):
    """Settings read from ``.linkdb.yaml``.

    Attributes:
        check_duplicate_tags: Report tags declared more than once.
        check_duplicate_links: Report link declarations that collide with a tag name.
        report_stray_lines: Warn about lines that are neither blank, comments nor commands.
        color: Colour mode for console output.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    check_duplicate_tags: bool = Field(alias="check-duplicate-tags", default=True)
    check_duplicate_links: bool = Field(alias="check-duplicate-links", default=True)
    report_stray_lines: bool = Field(alias="report-stray-lines", default=False)
    color: ColorMode = ColorMode.AUTO


def load_config(path: Path) -> LinkDbConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.linkdb.yaml`` file.

    Returns:
        A validated LinkDbConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return LinkDbConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(start: Path) -> Path | None:
    """Return the ``.linkdb.yaml`` next to ``start`` (a file or directory), if any."""
    directory = start if start.is_dir() else start.parent
    candidate = directory / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None
