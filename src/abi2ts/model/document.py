# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration document: the parsed contents of an ABI JSON file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

_FROZEN = ConfigDict(frozen=True)


class TypeAlias(BaseModel):
    """Declares ``new_type_name`` as a synonym for the type expression ``type``."""

    model_config = _FROZEN

    new_type_name: str
    type: str


class FieldDef(BaseModel):
    """A named, typed member of a struct."""

    model_config = _FROZEN

    name: str
    type: str


class Struct(BaseModel):
    """A struct declaration, optionally extending a base struct."""

    model_config = _FROZEN

    name: str
    base: str = ""
    fields: list[FieldDef] = _Field(default_factory=list)


class Action(BaseModel):
    """A contract action and the struct carrying its arguments."""

    model_config = _FROZEN

    name: str
    type: str
    ricardian_contract: str = ""


class Table(BaseModel):
    """A keyed multi-index table whose rows have type ``type``."""

    model_config = _FROZEN

    name: str
    type: str
    index_type: str = ""
    key_names: list[str] = _Field(default_factory=list)
    key_types: list[str] = _Field(default_factory=list)


class RicardianClause(BaseModel):
    model_config = _FROZEN

    id: str
    body: str


class ErrorMessage(BaseModel):
    model_config = _FROZEN

    error_code: int | str
    error_msg: str


class Extension(BaseModel):
    model_config = _FROZEN

    tag: int
    value: str


class Variant(BaseModel):
    """A tagged union; the position of each type in ``types`` is its wire tag."""

    model_config = _FROZEN

    name: str
    types: list[str] = _Field(default_factory=list)


class AbiDocument(BaseModel):
    """Top-level model representing a single ABI declaration document."""

    model_config = _FROZEN

    version: str
    types: list[TypeAlias] = _Field(default_factory=list)
    structs: list[Struct] = _Field(default_factory=list)
    actions: list[Action] = _Field(default_factory=list)
    tables: list[Table] = _Field(default_factory=list)
    ricardian_clauses: list[RicardianClause] = _Field(default_factory=list)
    error_messages: list[ErrorMessage] = _Field(default_factory=list)
    abi_extensions: list[Extension] = _Field(default_factory=list)
    variants: list[Variant] = _Field(default_factory=list)
