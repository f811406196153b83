#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for gdocs2html.

This module centralizes the hardcoded values used across the converter:
rendering baselines, Google Docs API enum values and the fixed lookup
tables consulted while building HTML.

Constants are organized by category:
1. Type Definitions - Literal types for API enums
2. Rendering Defaults - Baselines and CSS hooks for the HTML renderer
3. Google Docs API Values - Enum strings and lookup tables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

BodyNodeKind = Literal["paragraph", "table", "sectionBreak"]
BorderPosition = Literal["top", "bottom"]

# =============================================================================
# Rendering Defaults
# =============================================================================

# The higher the ratio, the smaller the rendered indentation
DEFAULT_TEXT_INDENT_RATIO = 4

# Runs matching these values get no inline font declarations
DEFAULT_BASE_FONT_SIZE = "10pt"
DEFAULT_BASE_FONT_WEIGHT = "400"

# Styling hooks for tables, empty means no class attribute
DEFAULT_TABLE_WRAPPER_CLASS = ""
DEFAULT_TABLE_CLASS = ""

DEFAULT_HTML_ESCAPE_HTML = True

DEFAULT_GDOCS_STRICT = True

DEFAULT_COLOR = "#000"
LINE_BREAK_TAG = "<br />"

# Characters removed from both ends of run text (ECMAScript WhiteSpace and LineTerminator)
TRIM_CHARACTERS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

TABLE_INLINE_STYLE = "border-collapse: collapse;"

# Font size (in the run's unit) rendered as a level 2 heading
HEADING_FONT_SIZE = 16

# =============================================================================
# Google Docs API Values
# =============================================================================

# Dispatch order for body nodes; the first key present on a node wins
BODY_NODE_KINDS: tuple[BodyNodeKind, ...] = ("paragraph", "table", "sectionBreak")

ALIGNMENT_CENTER = "CENTER"
ALIGNMENT_END = "END"

# START and JUSTIFIED need no declaration
ALIGNMENT_CSS: dict[str, str] = {
    ALIGNMENT_END: "right",
    ALIGNMENT_CENTER: "center",
}

WIDTH_TYPE_FIXED = "FIXED_WIDTH"

ORDERED_GLYPH_TYPE = "UPPER_ALPHA"

# tableCellStyle key for each rendered border position
CELL_BORDER_KEYS: dict[BorderPosition, str] = {
    "top": "borderTop",
    "bottom": "borderBottom",
}
