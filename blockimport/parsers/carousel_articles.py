"""Carousel-Articles: slide lists.

Rows are ``[image, title link]``; a slide with an image but no link yields
``[image, ""]`` and a slide without an image is dropped.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import clone_link, extract_media, text_of
from blockimport.extractors.locator import locate_first
from blockimport.items import Row
from blockimport.parsers.base import BlockParser
from blockimport.selectors import CAROUSEL_ARTICLES, VariantSelectors


class CarouselArticlesParser(BlockParser):
    name = CAROUSEL_ARTICLES

    def extract_unit(
        self,
        unit: Tag,
        document: BeautifulSoup,
        selectors: VariantSelectors,
    ) -> Row | None:
        img = extract_media(unit, selectors.field("media"))
        if img is None:
            return None
        link = locate_first(unit, selectors.field("link"))
        if link is None:
            return [img, ""]
        text = text_of(link)
        if not text:
            return [img, ""]
        return [img, clone_link(link, text)]


parser = CarouselArticlesParser()
parse = parser.parse
