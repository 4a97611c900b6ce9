"""Pre/post cleanup passes.

``before_transform`` runs on the page before any block is parsed;
``after_transform`` runs once every block has replaced its container.  Both
are declarative set-removal: every selector may match nothing, nodes removed
by an earlier selector are skipped, and running a pass twice is a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from blockimport.selectors import DEFAULT_CATALOGUE, SelectorCatalogue

logger = logging.getLogger(__name__)


def remove_nodes(root: Tag, selectors: Iterable[str]) -> int:
    """Decompose every descendant of *root* matching any of *selectors*.

    Returns the number of nodes removed.  Invalid selectors are logged and
    skipped.
    """
    removed = 0
    for selector in selectors:
        try:
            matches = root.select(selector)
        except SelectorSyntaxError as exc:
            logger.debug("Cleanup selector %r failed: %s", selector, exc)
            continue
        for el in matches:
            # Nested matches die with their ancestor
            if not isinstance(el, Tag) or el.decomposed:
                continue
            el.decompose()
            removed += 1
    return removed


def strip_attributes(root: Tag, attributes: Iterable[str]) -> None:
    """Remove *attributes* from *root* and every element below it."""
    names = tuple(attributes)
    if not names:
        return
    for el in (root, *root.find_all(True)):
        if not isinstance(el, Tag):
            continue
        for name in names:
            el.attrs.pop(name, None)


def before_transform(root: Tag, catalogue: SelectorCatalogue | None = None) -> None:
    """Strip consent banners, site chrome, scripts, tracking and widget controls."""
    cleanup = (catalogue or DEFAULT_CATALOGUE).cleanup
    removed = remove_nodes(root, cleanup.remove_before)
    logger.debug("Pre-pass removed %d node(s)", removed)


def after_transform(root: Tag, catalogue: SelectorCatalogue | None = None) -> None:
    """Re-sweep leftovers, drop residual wrappers and tracking attributes."""
    cleanup = (catalogue or DEFAULT_CATALOGUE).cleanup
    removed = 0
    if cleanup.resweep:
        removed += remove_nodes(root, cleanup.remove_before)
    removed += remove_nodes(root, cleanup.remove_after)
    strip_attributes(root, cleanup.strip_attributes)
    logger.debug("Post-pass removed %d node(s)", removed)
