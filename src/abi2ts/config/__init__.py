# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration for abi2ts."""

from abi2ts.config.settings import (
    SETTINGS_FILE_NAME,
    GeneratorConfig,
    GeneratorSettings,
    SettingsError,
    load_settings,
    select_naming_convention,
)

__all__ = [
    "SETTINGS_FILE_NAME",
    "GeneratorConfig",
    "GeneratorSettings",
    "SettingsError",
    "load_settings",
    "select_naming_convention",
]
