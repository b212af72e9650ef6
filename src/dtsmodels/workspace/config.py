# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the dtsmodels configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from dtsmodels.generator.build import DEFAULT_EXTENSION

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".dtsmodels.yaml"
DEFAULT_SCHEMA = "snapshot.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """Settings of a generation run.

    Attributes:
        schema: Path of the schema snapshot, relative to the config file.
        extension: Extension of the generated declaration files.
        exclude_collections: Collections left out of generation and the index.
    """

    schema: str = DEFAULT_SCHEMA
    extension: str = DEFAULT_EXTENSION
    exclude_collections: list[str] = field(default_factory=list)


def load_config(path: Path) -> GeneratorConfig:
    """Load and parse a dtsmodels configuration file.

    Args:
        path: Path to the `.dtsmodels.yaml` file.

    Returns:
        A GeneratorConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse config YAML text into a GeneratorConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    schema = _optional_string(data, "schema", DEFAULT_SCHEMA, source_label)
    extension = _optional_string(data, "extension", DEFAULT_EXTENSION, source_label)
    if not extension.startswith("."):
        raise ConfigError(f"{source_label}: 'extension' must start with '.'")

    exclude: list[str] = []
    if "exclude-collections" in data:
        raw_exclude = data["exclude-collections"]
        if not isinstance(raw_exclude, list) or not all(isinstance(name, str) for name in raw_exclude):
            raise ConfigError(f"{source_label}: 'exclude-collections' must be a list of strings")
        exclude = list(raw_exclude)

    return GeneratorConfig(schema=schema, extension=extension, exclude_collections=exclude)


_KNOWN_KEYS = {"schema", "extension", "exclude-collections"}


def _optional_string(mapping: dict[str, object], key: str, default: str, source_label: str) -> str:
    """Extract an optional string field from a mapping, raising ConfigError on a wrong type."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value
