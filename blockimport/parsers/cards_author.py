"""Cards-Author: author headshot grid.

Rows are ``[photo, content]`` with bold name, role text and profile link.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import Fragment, extract_media, text_of
from blockimport.extractors.locator import locate, locate_first
from blockimport.items import Row
from blockimport.parsers.base import BlockParser
from blockimport.selectors import CARDS_AUTHOR, VariantSelectors


def find_profile_link(unit: Tag, selectors: VariantSelectors) -> Tag | None:
    """Author page link, else the first styled link mentioning the keyword."""
    link = locate_first(unit, selectors.field("profile_link"))
    if link is not None:
        return link
    keyword = selectors.keyword("profile_link").lower()
    for candidate in locate(unit, selectors.field("links")):
        if keyword and keyword in candidate.get_text().lower():
            return candidate
    return None


class AuthorCardsParser(BlockParser):
    name = CARDS_AUTHOR

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
        name = locate_first(unit, selectors.field("name"))
        if name is not None:
            content.add_bold(text_of(name))
        role = locate_first(unit, selectors.field("role"))
        if role is not None:
            content.add_text(text_of(role))
        link = find_profile_link(unit, selectors)
        if link is not None:
            content.add_link(link)
        return [img, content.tag]


parser = AuthorCardsParser()
parse = parser.parse
