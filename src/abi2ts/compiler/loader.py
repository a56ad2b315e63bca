# Copyright 2026 abi2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of ABI declaration documents from raw JSON.

Input is decoded as UTF-8, parsed as JSON, and validated against the
:class:`~abi2ts.model.document.AbiDocument` schema. Any failure surfaces as
:class:`~abi2ts.compiler.errors.MalformedDocumentError` before the
transform runs.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from abi2ts.compiler.errors import MalformedDocumentError
from abi2ts.model.document import AbiDocument

# ###############
# Public Interface
# ###############


def load_document(data: bytes | str) -> AbiDocument:
    """Parse an ABI document from JSON bytes or text.

    Args:
        data: The raw document. Bytes are decoded as UTF-8.

    Returns:
        The validated :class:`AbiDocument`.

    Raises:
        MalformedDocumentError: If the data is not valid UTF-8 or JSON, or does
            not have the shape of an ABI document.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedDocumentError(f"ABI is not valid UTF-8: {exc}") from exc

    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(f"ABI is not valid JSON: {exc}") from exc

    if not isinstance(obj, dict):
        raise MalformedDocumentError(f"ABI must be a JSON object, got {type(obj).__name__}")

    try:
        return AbiDocument.model_validate(obj)
    except ValidationError as exc:
        raise MalformedDocumentError(f"Invalid ABI document: {exc}") from exc


def read_document(path: Path) -> AbiDocument:
    """Read and parse an ABI document from *path*.

    Raises:
        OSError: If the file cannot be read.
        MalformedDocumentError: If the contents are not a valid ABI document.
    """
    return load_document(path.read_bytes())
