#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/ast/lists.py
"""List boundary reconstruction.

The Docs API has no list container: list items are ordinary paragraphs that
reference a list id. Before rendering, the body is scanned once to find where
each list's ``<ul>``/``<ol>`` should open and close, producing a side table
keyed by document position. The renderer then stays a single flat pass.

Only one level of nesting is modeled. All entries with a non-zero nesting
level form a single sublevel group that uses the level 1 glyph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from gdocs2html.ast.nodes import ListDefinition, Node, Paragraph
from gdocs2html.exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)


@dataclass
class ListBoundaryMap:
    """Position-indexed list open and close tags.

    Parameters
    ----------
    open_tags : dict, default = empty dict
        Start index to the tag opening a list before that node
    close_tags : dict, default = empty dict
        Start index to the tag closing a list after that node

    """

    open_tags: dict[int, str] = field(default_factory=dict)
    close_tags: dict[int, str] = field(default_factory=dict)

    def opening_at(self, position: int) -> str:
        """Return the tag to emit before the node at ``position``."""
        return self.open_tags.get(position, "")

    def closing_at(self, position: int) -> str:
        """Return the tag to emit after the node at ``position``."""
        return self.close_tags.get(position, "")

    def mark(self, entries: Sequence[Paragraph], tag: str) -> None:
        """Open ``tag`` before the first entry and close it after the last."""
        self.open_tags[entries[0].start_index] = f"<{tag}>"
        self.close_tags[entries[-1].start_index] = f"</{tag}>"


def _level_tag(definition: ListDefinition, level: int) -> str:
    if level >= len(definition.nesting_levels):
        raise MalformedDocumentError(
            f"List '{definition.list_id}' has entries at nesting level {level} but defines "
            f"{len(definition.nesting_levels)} level(s)",
            path=f"lists.{definition.list_id}.listProperties.nestingLevels",
        )
    return definition.nesting_levels[level].list_tag


def build_list_boundaries(children: Sequence[Node], lists: dict[str, ListDefinition]) -> ListBoundaryMap:
    """Compute where list elements open and close in a document body.

    Parameters
    ----------
    children : sequence of Node
        Top-level body nodes in document order
    lists : dict
        List id to ListDefinition; lists are processed in this mapping's order

    Returns
    -------
    ListBoundaryMap
        Open and close tags keyed by node start index

    Raises
    ------
    MalformedDocumentError
        If a used list has no root-level entries, or has sublevel entries but
        no level 1 definition

    """
    bulleted = [node for node in children if isinstance(node, Paragraph) and node.bullet is not None]
    used_ids = {node.bullet.list_id for node in bulleted if node.bullet is not None}
    boundaries = ListBoundaryMap()

    for list_id, definition in lists.items():
        if list_id not in used_ids:
            continue
        entries = [node for node in bulleted if node.bullet is not None and node.bullet.list_id == list_id]
        root_entries = [node for node in entries if node.bullet is not None and node.bullet.is_root]
        sub_entries = [node for node in entries if node.bullet is not None and not node.bullet.is_root]

        if not root_entries:
            raise MalformedDocumentError(
                f"List '{list_id}' has {len(sub_entries)} nested entries but no root-level entries",
                path=f"lists.{list_id}",
            )
        boundaries.mark(root_entries, _level_tag(definition, 0))

        if sub_entries:
            deepest = max(node.bullet.nesting_level for node in sub_entries if node.bullet is not None)
            if deepest > 1:
                logger.warning(
                    "List '%s' reaches nesting level %d; levels past 1 are rendered as level 1", list_id, deepest
                )
            boundaries.mark(sub_entries, _level_tag(definition, 1))

        logger.debug(
            "List '%s': %d root entries, %d nested entries", list_id, len(root_entries), len(sub_entries)
        )

    undefined = used_ids.difference(lists)
    if undefined:
        logger.debug("Bullets reference undefined lists %s; no list tags emitted for them", sorted(undefined))

    return boundaries
