#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing Google Docs API documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from gdocs2html.constants import DEFAULT_GDOCS_STRICT
from gdocs2html.options.base import BaseParserOptions


@dataclass(frozen=True)
class GdocsParserOptions(BaseParserOptions):
    """Configuration options for turning a Docs API payload into an AST.

    Parameters
    ----------
    strict : bool, default True
        Raise MalformedDocumentError when required structure is missing
        (cell styles, list ids, nesting levels). When False, the parser logs a
        warning and falls back to defaults instead.

    """

    strict: bool = field(
        default=DEFAULT_GDOCS_STRICT,
        metadata={"help": "Fail on schema violations instead of degrading with a warning"},
    )
