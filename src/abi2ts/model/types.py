# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolved type descriptors produced by the type expression resolver."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class PrimitiveTypeRef(BaseModel):
    """Reference to a built-in ABI scalar such as ``uint64`` or ``asset``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    name: str


class OptionalTypeRef(BaseModel):
    """An optional value (``T?``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["optional"] = "optional"
    inner_type: TypeRef


class ArrayTypeRef(BaseModel):
    """A sequence of values (``T[]``)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element_type: TypeRef


class ExtensionTypeRef(BaseModel):
    """A binary extension (``T$``): the value may be missing from older data."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["extension"] = "extension"
    inner_type: TypeRef


class NamedTypeRef(BaseModel):
    """Reference to a struct or variant declared in the same document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str


# A resolved type expression. The `kind` discriminator keeps (de)serialization
# of nested descriptors unambiguous.
TypeRef = Annotated[
    PrimitiveTypeRef | OptionalTypeRef | ArrayTypeRef | ExtensionTypeRef | NamedTypeRef,
    _Field(discriminator="kind"),
]


# Resolve forward references for models that nest TypeRef.
OptionalTypeRef.model_rebuild()
ArrayTypeRef.model_rebuild()
ExtensionTypeRef.model_rebuild()
