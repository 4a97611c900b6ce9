"""Block assembler: render a :class:`~blockimport.items.Block` as a table.

The table layout is the one the document pipeline reads::

    <table>
      <tr><th colspan="N">Cards-Article</th></tr>
      <tr><td>(image)</td><td>(content)</td></tr>
      ...
    </table>

The first row names the variant; every following row is one block row.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import clone, new_document
from blockimport.items import Block, Cell

logger = logging.getLogger(__name__)


def _fill_cell(td: Tag, cell: Cell) -> None:
    if isinstance(cell, Tag):
        # Cells stay reusable: the table gets its own copy
        td.append(clone(cell))
    elif cell:
        td.string = str(cell)


def create_block_table(block: Block, document: BeautifulSoup | None = None) -> Tag:
    """Build the ``<table>`` for *block*; *block* itself is not modified."""
    doc = document if document is not None else new_document()
    table = doc.new_tag("table")

    header_row = doc.new_tag("tr")
    th = doc.new_tag("th")
    th.string = block.name
    columns = block.column_count
    if columns > 1:
        th["colspan"] = str(columns)
    header_row.append(th)
    table.append(header_row)

    for row in block.rows:
        tr = doc.new_tag("tr")
        for cell in row:
            td = doc.new_tag("td")
            _fill_cell(td, cell)
            tr.append(td)
        table.append(tr)
    return table


def replace_with_block(
    element: Tag,
    block: Block,
    document: BeautifulSoup | None = None,
) -> Tag | None:
    """Replace *element* with the table for *block*.

    Returns the inserted table, or None when *block* has no rows or *element*
    is not attached to a tree (nothing is changed in either case).
    """
    if block.is_empty:
        logger.debug("Block %s has no rows; container left in place", block.name)
        return None
    if element.parent is None:
        logger.debug("Container for %s is detached; not replaced", block.name)
        return None
    table = create_block_table(block, document)
    element.replace_with(table)
    return table
