# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration and the YAML settings file parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from abi2ts.compiler.errors import Abi2TsError
from abi2ts.naming.casing import NamingConvention, TypeFormatter, make_type_formatter, snake_to_pascal

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".abi2ts.yaml"


class SettingsError(Abi2TsError):
    """Raised when generator settings are invalid or cannot be loaded."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration consumed by :func:`~abi2ts.compiler.emitter.transform`.

    Attributes:
        indent: The string prepended once per nesting level inside a declaration body.
        type_formatter: Applied to every declared type name and field name.
        export_declarations: Whether declarations are exported from the module.
    """

    indent: str = "    "
    type_formatter: TypeFormatter = field(default=snake_to_pascal)
    export_declarations: bool = False


@dataclass
class GeneratorSettings:
    """User-facing generator options, as given on the command line or in a settings file.

    Attributes:
        naming_convention: Casing applied to type and field names.
        prefix: Optional prefix prepended to every formatted name.
        indent_width: Number of indent characters per nesting level.
        use_tabs: Indent with tabs instead of spaces.
        export: Export the generated declarations.
    """

    naming_convention: NamingConvention = NamingConvention.PASCAL
    prefix: str | None = None
    indent_width: int = 4
    use_tabs: bool = False
    export: bool = False

    def to_config(self) -> GeneratorConfig:
        """Build the core :class:`GeneratorConfig` from these settings.

        Raises:
            SettingsError: If the indent width is negative.
        """
        if self.indent_width < 0:
            raise SettingsError(f"Indent width must not be negative, got {self.indent_width}")
        indent_char = "\t" if self.use_tabs else " "
        return GeneratorConfig(
            indent=indent_char * self.indent_width,
            type_formatter=make_type_formatter(self.naming_convention, self.prefix),
            export_declarations=self.export,
        )


def select_naming_convention(
    pascal_case: bool = False,
    camel_case: bool = False,
    snake_case: bool = False,
) -> NamingConvention:
    """Return the single naming convention selected by a set of exclusive flags.

    PascalCase is used when no flag is set.

    Raises:
        SettingsError: If more than one flag is set.
    """
    selected = [
        convention
        for convention, flag in (
            (NamingConvention.PASCAL, pascal_case),
            (NamingConvention.CAMEL, camel_case),
            (NamingConvention.SNAKE, snake_case),
        )
        if flag
    ]
    if len(selected) > 1:
        names = ", ".join(c.value for c in selected)
        raise SettingsError(f"Only one naming convention may be selected, got: {names}")
    return selected[0] if selected else NamingConvention.PASCAL


def load_settings(path: Path) -> GeneratorSettings:
    """Load and parse an abi2ts settings file.

    Args:
        path: Path to the `.abi2ts.yaml` file.

    Returns:
        A GeneratorSettings instance populated from the file. Keys that are
        absent keep their default values.

    Raises:
        SettingsError: If the file cannot be read or the settings are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file: {exc}") from exc

    return _parse_settings(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = ("naming-convention", "prefix", "indent", "use-tabs", "export")


def _parse_settings(text: str, source_label: str = "<string>") -> GeneratorSettings:
    """Parse settings YAML text into GeneratorSettings.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        SettingsError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorSettings()

    if not isinstance(data, dict):
        raise SettingsError(f"{source_label}: settings must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise SettingsError(f"{source_label}: unknown setting(s): {', '.join(unknown)}")

    settings = GeneratorSettings()
    if "naming-convention" in data:
        settings.naming_convention = _parse_naming_convention(data["naming-convention"], source_label)
    if "prefix" in data:
        prefix = data["prefix"]
        if prefix is not None and not isinstance(prefix, str):
            raise SettingsError(f"{source_label}: 'prefix' must be a string")
        settings.prefix = prefix
    if "indent" in data:
        indent = data["indent"]
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise SettingsError(f"{source_label}: 'indent' must be a non-negative integer")
        settings.indent_width = indent
    if "use-tabs" in data:
        settings.use_tabs = _require_bool(data, "use-tabs", source_label)
    if "export" in data:
        settings.export = _require_bool(data, "export", source_label)
    return settings


def _parse_naming_convention(value: object, source_label: str) -> NamingConvention:
    """Map a settings value such as ``camel`` to a NamingConvention."""
    if isinstance(value, str):
        for convention in NamingConvention:
            if convention.value == value.lower():
                return convention
    choices = ", ".join(c.value for c in NamingConvention)
    raise SettingsError(f"{source_label}: 'naming-convention' must be one of: {choices}")


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    """Extract a boolean field from a mapping, raising SettingsError on any other type."""
    value = mapping[key]
    if not isinstance(value, bool):
        raise SettingsError(f"{source_label}: '{key}' must be true or false")
    return value
