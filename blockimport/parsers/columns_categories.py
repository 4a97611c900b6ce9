"""Columns-Categories: link columns under bold headings.

The whole container becomes a single row with one cell per column group.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import Fragment, text_of
from blockimport.extractors.locator import locate, locate_first
from blockimport.items import Row
from blockimport.parsers.base import BlockParser
from blockimport.selectors import COLUMNS_CATEGORIES, VariantSelectors


class CategoryColumnsParser(BlockParser):
    name = COLUMNS_CATEGORIES

    def extract_unit(
        self,
        unit: Tag,
        document: BeautifulSoup,
        selectors: VariantSelectors,
    ) -> Row | None:
        column = Fragment(document)
        heading = locate_first(unit, selectors.field("heading"))
        if heading is not None:
            column.add_bold(text_of(heading))
        for link in locate(unit, selectors.field("links")):
            column.add_link(link)
        return [column.tag]

    def build_rows(self, extracted: list[Row]) -> list[Row]:
        cells = [cell for row in extracted for cell in row]
        return [cells] if cells else []


parser = CategoryColumnsParser()
parse = parser.parse
