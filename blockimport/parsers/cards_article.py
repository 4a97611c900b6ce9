"""Cards-Article: featured pods and article grids.

Rows are ``[image, content]``; content lines are, in order: bold category
(wrapped in its link when it has one), bold title, description paragraphs,
"Read full article" CTA.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import (
    Fragment,
    add_category,
    add_cta,
    add_descriptions,
    add_title,
    extract_media,
)
from blockimport.items import Row
from blockimport.parsers.base import BlockParser
from blockimport.selectors import CARDS_ARTICLE, VariantSelectors


class ArticleCardsParser(BlockParser):
    name = CARDS_ARTICLE

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
        category = add_category(
            content,
            unit,
            selectors.field("category_link"),
            selectors.field("category_heading"),
        )
        add_title(
            content,
            unit,
            selectors.field("title"),
            selectors.field("links"),
            exclude=category,
        )
        add_descriptions(content, unit, selectors.field("description"))
        # Without a distinct CTA the last styled link is the category link
        add_cta(content, unit, selectors.field("cta"), keyword=selectors.keyword("cta"))
        return [img, content.tag]


parser = ArticleCardsParser()
parse = parser.parse
