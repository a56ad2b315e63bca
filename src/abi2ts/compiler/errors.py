# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by the loader, resolver, and emitter."""

# ###############
# Public Interface
# ###############


class Abi2TsError(Exception):
    """Base class for every error raised by abi2ts."""


class MalformedDocumentError(Abi2TsError):
    """Raised when input is not valid JSON or does not have the ABI document shape."""


class TransformError(Abi2TsError):
    """Raised when a well-formed document cannot be turned into declarations.

    Any TransformError aborts the whole transform; no partial output is produced.
    """


class MalformedTypeError(TransformError):
    """Raised for an empty type expression or one made only of marker characters."""


class UnknownTypeError(TransformError):
    """Raised when a bare type name is not a primitive, alias, struct, or variant."""


class CyclicAliasError(TransformError):
    """Raised when alias resolution revisits a name on the current resolution path."""


class MissingBaseError(TransformError):
    """Raised when a struct's ``base`` names an undeclared struct."""


class InheritanceCycleError(TransformError):
    """Raised when a struct is its own transitive base."""
