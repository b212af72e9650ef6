# Copyright 2026 dtsmodels Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration file support for dtsmodels."""

from dtsmodels.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    GeneratorConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "GeneratorConfig",
    "load_config",
]
