"""Cards-Calculator: tool cards with an icon, name, blurb and "Get started"."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import (
    Fragment,
    add_cta,
    add_descriptions,
    extract_media,
    text_of,
)
from blockimport.extractors.locator import locate_first
from blockimport.items import Row
from blockimport.parsers.base import BlockParser
from blockimport.selectors import CARDS_CALCULATOR, VariantSelectors


class CalculatorCardsParser(BlockParser):
    name = CARDS_CALCULATOR

    def extract_unit(
        self,
        unit: Tag,
        document: BeautifulSoup,
        selectors: VariantSelectors,
    ) -> Row | None:
        img = extract_media(unit, selectors.field("media"))
        if img is None:
            return None

        content = Fragment(document)
        title = locate_first(unit, selectors.field("title"))
        if title is not None:
            content.add_bold(text_of(title))
        add_descriptions(content, unit, selectors.field("description"))
        add_cta(content, unit, selectors.field("cta"), keyword=selectors.keyword("cta"))
        return [img, content.tag]


parser = CalculatorCardsParser()
parse = parser.parse
