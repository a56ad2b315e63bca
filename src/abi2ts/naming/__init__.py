# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Naming conventions for generated declarations."""

from abi2ts.naming.casing import (
    NamingConvention,
    TypeFormatter,
    any_to_snake,
    formatter_for,
    make_type_formatter,
    snake_to_camel,
    snake_to_pascal,
)

__all__ = [
    "NamingConvention",
    "TypeFormatter",
    "any_to_snake",
    "formatter_for",
    "make_type_formatter",
    "snake_to_camel",
    "snake_to_pascal",
]
