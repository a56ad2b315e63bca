# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeScript declaration emitter.

Walks the structs and variants of an ABI document in input order and renders
each as a TypeScript ``interface`` or ``type`` declaration. Struct inheritance
is flattened into the field list of each interface, so the generated
declarations stand alone. Tables and actions refer to structs that are already
emitted and produce no output of their own.

Example output for a ``transfer`` struct with default settings::

    interface Transfer {
        From: string
        To: string
        Quantity: string
        Memo: string
    }
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from abi2ts.compiler.errors import InheritanceCycleError, MissingBaseError, TransformError
from abi2ts.compiler.primitives import primitive_to_ts
from abi2ts.compiler.resolver import TypeResolver
from abi2ts.model.document import AbiDocument, FieldDef, Struct, Variant
from abi2ts.model.types import (
    ArrayTypeRef,
    ExtensionTypeRef,
    NamedTypeRef,
    OptionalTypeRef,
    PrimitiveTypeRef,
    TypeRef,
)
from abi2ts.naming.casing import TypeFormatter

if TYPE_CHECKING:
    from abi2ts.config.settings import GeneratorConfig

# ###############
# Public Interface
# ###############

EXPORT_MARKER = "export "


def transform(document: AbiDocument, config: GeneratorConfig) -> list[str]:
    """Generate TypeScript declarations for an ABI document.

    Structs are emitted first, then variants, each group in document order.
    Declarations are separated by a single empty line.

    Args:
        document: The parsed ABI document.
        config: Indentation, name formatting, and export settings.

    Returns:
        The generated source as a list of lines without line terminators.

    Raises:
        TransformError: If any type expression or struct base cannot be
            resolved. No lines are returned in that case.
    """
    return _DeclarationEmitter(document, config).emit()


def effective_fields(
    document: AbiDocument,
    struct: Struct,
    structs: dict[str, Struct] | None = None,
) -> list[FieldDef]:
    """Return the inheritance-flattened fields of *struct*.

    The fields of the root base come first, followed by each derived struct's
    own fields down to *struct*. Pass *structs* from :func:`index_structs` to
    reuse one index across many calls on the same document.

    Raises:
        MissingBaseError: If a base in the chain is not declared.
        InheritanceCycleError: If the chain leads back to a struct already in it.
    """
    if structs is None:
        structs = index_structs(document)
    return _flatten(struct, structs)


def index_structs(document: AbiDocument) -> dict[str, Struct]:
    """Map struct names to declarations. The first declaration of a name wins."""
    structs: dict[str, Struct] = {}
    for struct in document.structs:
        structs.setdefault(struct.name, struct)
    return structs


def render_type(type_ref: TypeRef, type_formatter: TypeFormatter) -> str:
    """Render a resolved type descriptor as a TypeScript type expression."""
    wrappers: list[TypeRef] = []
    while isinstance(type_ref, (OptionalTypeRef, ExtensionTypeRef, ArrayTypeRef)):
        wrappers.append(type_ref)
        type_ref = type_ref.element_type if isinstance(type_ref, ArrayTypeRef) else type_ref.inner_type

    if isinstance(type_ref, PrimitiveTypeRef):
        text = primitive_to_ts(type_ref.name)
    elif isinstance(type_ref, NamedTypeRef):
        text = type_formatter(type_ref.name)
    else:
        raise TypeError(f"Unsupported type descriptor: {type_ref!r}")

    # Innermost wrapper first; nested optionals collapse into one "| undefined".
    inner_optional = False
    for wrapper in reversed(wrappers):
        if isinstance(wrapper, ArrayTypeRef):
            text = f"({text})[]" if inner_optional else f"{text}[]"
            inner_optional = False
        elif not inner_optional:
            text = f"{text} | undefined"
            inner_optional = True
    return text


# ################
# Implementation
# ################


class _DeclarationEmitter:
    """Renders the declarations of a single document."""

    def __init__(self, document: AbiDocument, config: GeneratorConfig) -> None:
        self._document = document
        self._resolver = TypeResolver(document)
        self._structs = index_structs(document)
        self._fmt = config.type_formatter
        self._indent = config.indent
        self._export = EXPORT_MARKER if config.export_declarations else ""

    def emit(self) -> list[str]:
        """Render every struct and variant and join them into one line list."""
        blocks: list[list[str]] = []
        for struct in self._document.structs:
            blocks.append(self._emit_struct(struct))
        for variant in self._document.variants:
            blocks.append(self._emit_variant(variant))

        lines: list[str] = []
        for index, block in enumerate(blocks):
            if index:
                lines.append("")
            lines.extend(block)
        return lines

    def _emit_struct(self, struct: Struct) -> list[str]:
        lines = [f"{self._export}interface {self._fmt(struct.name)} {{"]
        for field_def in _flatten(struct, self._structs):
            type_ref = self._resolve(field_def.type, f"field '{field_def.name}' of struct '{struct.name}'")
            member = self._fmt(field_def.name)
            if isinstance(type_ref, (OptionalTypeRef, ExtensionTypeRef)):
                # Absent values are expressed on the member itself.
                member += "?"
                type_ref = type_ref.inner_type
            lines.append(f"{self._indent}{member}: {render_type(type_ref, self._fmt)}")
        lines.append("}")
        return lines

    def _emit_variant(self, variant: Variant) -> list[str]:
        name = self._fmt(variant.name)
        if not variant.types:
            return [f"{self._export}type {name} = never"]

        # Each alternative is a [tag, value] pair; list position is the wire tag.
        lines = [f"{self._export}type {name} ="]
        for expression in variant.types:
            type_ref = self._resolve(expression, f"variant '{variant.name}'")
            lines.append(f"{self._indent}| [{json.dumps(expression)}, {render_type(type_ref, self._fmt)}]")
        return lines

    def _resolve(self, expression: str, location: str) -> TypeRef:
        """Resolve *expression*, adding *location* to the message of any error."""
        try:
            return self._resolver.resolve(expression)
        except TransformError as exc:
            raise type(exc)(f"{exc} in {location}") from exc


def _flatten(struct: Struct, structs: dict[str, Struct]) -> list[FieldDef]:
    """Concatenate the fields along the base chain of *struct*, root first."""
    chain = [struct]
    visited = {struct.name}
    current = struct
    while current.base:
        if current.base in visited:
            path = " -> ".join([s.name for s in chain] + [current.base])
            raise InheritanceCycleError(f"Struct '{struct.name}' inherits from itself: {path}")
        base = structs.get(current.base)
        if base is None:
            raise MissingBaseError(f"Struct '{current.name}' has undeclared base '{current.base}'")
        chain.append(base)
        visited.add(base.name)
        current = base

    fields: list[FieldDef] = []
    for member in reversed(chain):
        fields.extend(member.fields)
    return fields
