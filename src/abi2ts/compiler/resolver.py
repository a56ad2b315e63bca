# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type expression resolution.

Turns an ABI type expression such as ``uint64[]``, ``asset?`` or ``my_struct$``
into a nested :data:`~abi2ts.model.types.TypeRef`. Suffix markers are stripped
from the end of the expression one at a time, each wrapping the resolution of
the remainder. Bare names are looked up as aliases first, then as declared
structs and variants, and finally as built-in scalars.
"""

from __future__ import annotations

from abi2ts.compiler.errors import CyclicAliasError, MalformedTypeError, UnknownTypeError
from abi2ts.compiler.primitives import is_primitive
from abi2ts.model.document import AbiDocument
from abi2ts.model.types import (
    ArrayTypeRef,
    ExtensionTypeRef,
    NamedTypeRef,
    OptionalTypeRef,
    PrimitiveTypeRef,
    TypeRef,
)

# ###############
# Public Interface
# ###############

OPTIONAL_MARKER = "?"
ARRAY_MARKER = "[]"
EXTENSION_MARKER = "$"


class TypeResolver:
    """Resolves type expressions against the declarations of one document.

    The alias table and the set of declared struct and variant names are built
    once on construction and never modified afterwards. When a name is
    declared more than once, the first declaration wins.
    """

    def __init__(self, document: AbiDocument) -> None:
        self._aliases: dict[str, str] = {}
        for alias in document.types:
            self._aliases.setdefault(alias.new_type_name, alias.type)
        self._declared: set[str] = {s.name for s in document.structs} | {v.name for v in document.variants}

    def is_declared(self, name: str) -> bool:
        """Return True if *name* is a struct or variant of the document."""
        return name in self._declared

    def is_alias(self, name: str) -> bool:
        """Return True if *name* is declared as a type alias."""
        return name in self._aliases

    def resolve(self, expression: str) -> TypeRef:
        """Resolve a type expression to a type descriptor.

        Args:
            expression: The raw type expression, e.g. ``"name[]"``.

        Returns:
            The resolved descriptor.

        Raises:
            MalformedTypeError: If the expression is empty or consists only of
                marker characters.
            UnknownTypeError: If a bare name is not a primitive, alias, struct,
                or variant.
            CyclicAliasError: If resolving an alias leads back to itself.
        """
        if not expression:
            raise MalformedTypeError("Empty type expression")

        # Markers are collected outermost first while alias hops are followed
        # in place, so arbitrarily long chains need no recursion.
        markers: list[str] = []
        visited: list[str] = []
        origin = expression
        current = expression
        while True:
            marker = _trailing_marker(current)
            if marker:
                markers.append(marker)
                current = current[: -len(marker)]
                continue

            if not current:
                raise MalformedTypeError(f"Type expression '{origin}' does not name a type")

            if current not in self._aliases:
                break
            if current in visited:
                chain = " -> ".join([*visited, current])
                raise CyclicAliasError(f"Cyclic type alias: {chain}")
            target = self._aliases[current]
            if not target:
                raise MalformedTypeError(f"Type alias '{current}' has an empty target type")
            visited.append(current)
            origin = target
            current = target

        result = self._resolve_bare(current, origin)
        for marker in reversed(markers):
            result = _wrap(marker, result)
        return result

    def _resolve_bare(self, name: str, origin: str) -> TypeRef:
        """Resolve a name carrying no markers and naming no alias."""
        if name in self._declared:
            return NamedTypeRef(name=name)

        if is_primitive(name):
            return PrimitiveTypeRef(name=name)

        if origin == name:
            raise UnknownTypeError(f"Unknown type '{name}'")
        raise UnknownTypeError(f"Unknown type '{name}' in type expression '{origin}'")


def resolve_type(expression: str, document: AbiDocument) -> TypeRef:
    """Resolve a single type expression against *document*.

    Builds a fresh :class:`TypeResolver`; use the class directly when resolving
    many expressions against the same document.
    """
    return TypeResolver(document).resolve(expression)


# ################
# Implementation
# ################


def _trailing_marker(expression: str) -> str | None:
    for marker in (OPTIONAL_MARKER, ARRAY_MARKER, EXTENSION_MARKER):
        if expression.endswith(marker):
            return marker
    return None


def _wrap(marker: str, inner: TypeRef) -> TypeRef:
    if marker == OPTIONAL_MARKER:
        return OptionalTypeRef(inner_type=inner)
    if marker == ARRAY_MARKER:
        return ArrayTypeRef(element_type=inner)
    return ExtensionTypeRef(inner_type=inner)
