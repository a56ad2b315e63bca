# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier casing transforms applied to every declared name."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable

# ###############
# Public Interface
# ###############

TypeFormatter = Callable[[str], str]


class NamingConvention(enum.Enum):
    """The casing applied to generated type and member names."""

    PASCAL = "pascal"
    CAMEL = "camel"
    SNAKE = "snake"


def snake_to_pascal(name: str) -> str:
    """Return the PascalCase version of a snake_case string.

    Empty segments (from leading, trailing, or doubled underscores) are kept
    as a literal ``_``.
    """
    return "".join((segment[0].upper() if segment else "_") + segment[1:] for segment in name.split("_"))


def snake_to_camel(name: str) -> str:
    """Return the camelCase version of a snake_case string."""
    pascal = snake_to_pascal(name)
    return pascal[0].lower() + pascal[1:]


def any_to_snake(name: str) -> str:
    """Return the snake_case version of a PascalCase or camelCase string."""
    return _UPPERCASE.sub(_snake_replacement, name)


def formatter_for(convention: NamingConvention) -> TypeFormatter:
    """Return the casing function for *convention*."""
    return _FORMATTERS[convention]


def make_type_formatter(
    convention: NamingConvention = NamingConvention.PASCAL,
    prefix: str | None = None,
) -> TypeFormatter:
    """Build the name formatter for a naming convention and optional prefix.

    The prefix is prepended to the already-cased name, so it is never altered
    by the casing transform itself.
    """
    fmt = formatter_for(convention)
    if not prefix:
        return fmt

    def _prefixed(name: str) -> str:
        return prefix + fmt(name)

    return _prefixed


# ################
# Implementation
# ################

_UPPERCASE = re.compile(r"[A-Z]")

_FORMATTERS: dict[NamingConvention, TypeFormatter] = {
    NamingConvention.PASCAL: snake_to_pascal,
    NamingConvention.CAMEL: snake_to_camel,
    NamingConvention.SNAKE: any_to_snake,
}


def _snake_replacement(match: re.Match[str]) -> str:
    prefix = "_" if match.start() != 0 else ""
    return prefix + match.group(0).lower()
