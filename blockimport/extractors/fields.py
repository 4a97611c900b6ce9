"""Shared field extraction for block parsers.

Every value placed into a cell is built from a *copy* of the source node
(``copy.copy`` on a bs4 ``Tag`` is a deep, detached copy), so cleanup or
replacement of the source tree cannot change cells that were already built.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from blockimport import settings
from blockimport.extractors.locator import locate, locate_first

logger = logging.getLogger(__name__)


def new_document() -> BeautifulSoup:
    """Return an empty scratch document for building detached cells."""
    return BeautifulSoup("", settings.HTML_PARSER)


def text_of(el: Tag) -> str:
    return el.get_text().strip()


def clone(el: Tag) -> Tag:
    return copy.copy(el)


def clone_link(link: Tag, text: str) -> Tag:
    """Copy *link* (href and attributes kept) with its content flattened to *text*."""
    a = clone(link)
    a.string = text
    return a


class Fragment:
    """Ordered ``<p>`` lines of one content cell.

    Each ``add_*`` method returns False and appends nothing when the value is
    empty or whitespace-only.
    """

    def __init__(self, document: BeautifulSoup) -> None:
        self._doc = document
        self.tag: Tag = document.new_tag("div")

    @property
    def line_count(self) -> int:
        return len(self.tag.find_all("p", recursive=False))

    def _line(self, *children: Tag | str) -> None:
        p = self._doc.new_tag("p")
        for child in children:
            p.append(child)
        self.tag.append(p)

    def _strong(self, text: str) -> Tag:
        strong = self._doc.new_tag("strong")
        strong.string = text
        return strong

    def add_text(self, text: str) -> bool:
        text = text.strip()
        if not text:
            return False
        self._line(text)
        return True

    def add_bold(self, text: str) -> bool:
        text = text.strip()
        if not text:
            return False
        self._line(self._strong(text))
        return True

    def add_link(self, link: Tag, text: str | None = None) -> bool:
        text = (text if text is not None else link.get_text()).strip()
        if not text:
            return False
        self._line(clone_link(link, text))
        return True

    def add_bold_link(self, link: Tag, text: str) -> bool:
        """Append a copy of *link* whose only content is ``<strong>text</strong>``."""
        text = text.strip()
        if not text:
            return False
        a = clone(link)
        a.clear()
        a.append(self._strong(text))
        self._line(a)
        return True

    def add_url(self, url: str) -> bool:
        """Append a new link whose href and text are both *url*."""
        url = url.strip()
        if not url:
            return False
        a = self._doc.new_tag("a", href=url)
        a.string = url
        self._line(a)
        return True


# ---------------------------------------------------------------------------
# Field helpers (shared fallback conventions)
# ---------------------------------------------------------------------------

def extract_media(unit: Tag, patterns: Sequence[str]) -> Tag | None:
    """Copy of the first image anywhere inside *unit*, or None."""
    img = locate_first(unit, patterns or ("img",))
    return clone(img) if img is not None else None


def add_category(
    fragment: Fragment,
    unit: Tag,
    link_heading: Sequence[str],
    bare_heading: Sequence[str],
) -> Tag | None:
    """Append the eyebrow/category line and return the heading it came from.

    A small heading wrapped in a link wins and keeps the link; a bare styled
    heading is emitted as plain bold text.
    """
    heading = locate_first(unit, link_heading)
    if heading is not None:
        link = heading if heading.name == "a" else heading.find_parent("a")
        if link is not None:
            fragment.add_bold_link(link, text_of(heading))
        else:
            fragment.add_bold(text_of(heading))
        return heading
    heading = locate_first(unit, bare_heading)
    if heading is not None:
        fragment.add_bold(text_of(heading))
    return heading


def add_title(
    fragment: Fragment,
    unit: Tag,
    headings: Sequence[str],
    links: Sequence[str],
    exclude: Tag | None = None,
) -> bool:
    """Append the bold title line.

    A styled heading (other than *exclude*) wins.  Otherwise the *second*
    styled link is the title: the first is the category link.  A unit with a
    single styled link gets no title.
    """
    for heading in locate(unit, headings):
        if heading is exclude:
            continue
        return fragment.add_bold(text_of(heading))
    styled = locate(unit, links)
    if len(styled) > 1:
        return fragment.add_bold(text_of(styled[1]))
    logger.debug("No title found in unit <%s class=%s>", unit.name, unit.get("class"))
    return False


def add_descriptions(fragment: Fragment, unit: Tag, patterns: Sequence[str]) -> int:
    """Append one line per matching body paragraph; return how many were added."""
    return sum(1 for p in locate(unit, patterns) if fragment.add_text(text_of(p)))


def last_link(unit: Tag, patterns: Sequence[str]) -> Tag | None:
    matches = locate(unit, patterns)
    return matches[-1] if matches else None


def add_cta(fragment: Fragment, unit: Tag, patterns: Sequence[str], keyword: str = "") -> bool:
    """Append the last styled link as call-to-action.

    With a *keyword*, the link is kept only when its text contains it
    (case-insensitive).
    """
    link = last_link(unit, patterns)
    if link is None:
        return False
    text = text_of(link)
    if keyword and keyword.lower() not in text.lower():
        logger.debug("CTA %r rejected: no %r in text", text, keyword)
        return False
    return fragment.add_link(link, text)
