#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/utils/inputs.py
"""Uniform loading of Docs API payloads.

A document may arrive as an already decoded mapping (straight from an API
client), as JSON text or bytes, as a path to a JSON file, or as an open
stream. Everything is reduced to a plain mapping here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, Mapping, Union

from gdocs2html.exceptions import InputError, MalformedDocumentError

logger = logging.getLogger(__name__)

DocumentSource = Union[Mapping[str, Any], str, Path, bytes, IO[bytes], IO[str]]


def is_path_like(obj: Any) -> bool:
    """Check whether ``obj`` should be treated as a file path.

    Strings starting with ``{`` (after whitespace) are JSON text, not paths.
    """
    if isinstance(obj, Path):
        return True
    return isinstance(obj, str) and not obj.lstrip().startswith("{")


def _decode_json(text: Union[str, bytes], origin: str | None) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputError(f"Input is not valid JSON: {e}", input_path=origin, original_error=e) from e


def load_document_payload(source: DocumentSource) -> Mapping[str, Any]:
    """Load a Docs API document into a mapping.

    Parameters
    ----------
    source : Mapping, str, Path, bytes, IO[bytes] or IO[str]
        Decoded document, JSON text, JSON bytes, path to a JSON file, or a
        stream containing JSON

    Returns
    -------
    Mapping
        The decoded document

    Raises
    ------
    InputError
        If the source cannot be read or is not valid JSON
    MalformedDocumentError
        If the decoded JSON is not an object

    """
    origin: str | None = None
    if isinstance(source, Mapping):
        return source
    if is_path_like(source):
        origin = str(source)
        try:
            raw: Any = Path(origin).read_bytes()
        except OSError as e:
            raise InputError(f"Cannot read input file: {e}", input_path=origin, original_error=e) from e
        logger.debug("Read %d bytes from %s", len(raw), origin)
        payload = _decode_json(raw, origin)
    elif isinstance(source, (str, bytes)):
        payload = _decode_json(source, origin)
    elif hasattr(source, "read"):
        name = getattr(source, "name", None)
        origin = name if isinstance(name, str) else None
        payload = _decode_json(source.read(), origin)
    else:
        raise InputError(f"Unsupported input type: {type(source).__name__}")

    if not isinstance(payload, Mapping):
        raise MalformedDocumentError(f"Document must be a JSON object, got {type(payload).__name__}", path="document")
    return payload
