"""Unit locator: prioritized selector cascades.

A cascade is an ordered list of CSS selectors.  The matches of the first
selector that finds anything are returned; later selectors are never tried
once one succeeds (first-match-wins, not union).  The same rule drives field
lookups inside a unit, so every pattern list in the catalogue reads the same
way.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bs4 import Tag
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)


def _select(root: Tag, selector: str) -> list[Tag]:
    try:
        return [el for el in root.select(selector) if isinstance(el, Tag)]
    except SelectorSyntaxError as exc:
        logger.debug("CSS selector %r failed: %s", selector, exc)
        return []


def locate(root: Tag, patterns: Sequence[str]) -> list[Tag]:
    """Return the document-ordered matches of the first productive pattern.

    An empty list means every tier came up empty.
    """
    for tier, selector in enumerate(patterns, 1):
        matches = _select(root, selector)
        if matches:
            logger.debug("Cascade tier %d (%s) matched %d unit(s)", tier, selector, len(matches))
            return matches
    return []


def locate_first(root: Tag, patterns: Sequence[str]) -> Tag | None:
    """Return the first match of the first productive pattern, or None."""
    matches = locate(root, patterns)
    return matches[0] if matches else None
