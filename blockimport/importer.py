"""blockimport.importer: page-level import API.

Runs the whole flow on an HTML string that was fetched elsewhere:
cleanup pre-pass, block parsing and replacement, cleanup post-pass.  No
network or file access.

Basic usage::

    from blockimport.importer import import_html

    result = import_html(html, {"div.idsTSTabs": "Tabs-Video"})
    print(result.html)
    for block in result.blocks:
        print(block.name, len(block.rows))

Single container::

    from blockimport.importer import parse_element

    block = parse_element(container, "Cards-Article", document=soup)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from blockimport import settings
from blockimport.assembler import replace_with_block
from blockimport.extractors.cleanup import after_transform, before_transform
from blockimport.items import Block, ImportSchema, SkippedContainer
from blockimport.plugins import get_parser, get_transformers
from blockimport.profiles import blocks_from_profile, catalogue_from_profile, load_profile
from blockimport.selectors import DEFAULT_CATALOGUE, SelectorCatalogue

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of :func:`import_html`."""

    html: str
    blocks: list[Block] = field(default_factory=list)
    skipped: list[SkippedContainer] = field(default_factory=list)
    url: str = ""

    def to_schema(self) -> ImportSchema:
        return ImportSchema(
            url=self.url,
            html=self.html,
            blocks=[b.to_schema() for b in self.blocks],
            skipped=list(self.skipped),
        )


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------

def run_transform_hook(
    hook: str,
    root: Tag,
    catalogue: SelectorCatalogue | None = None,
) -> None:
    """Run the built-in cleanup for *hook*, then every registered transformer."""
    if hook == settings.BEFORE_TRANSFORM:
        before_transform(root, catalogue)
    elif hook == settings.AFTER_TRANSFORM:
        after_transform(root, catalogue)
    else:
        raise ValueError(f"Unknown transform hook: {hook!r}")

    for plugin in get_transformers():
        try:
            plugin.transform(hook, root)
        except Exception as exc:
            logger.warning("Transformer plugin %s failed on %s: %s", plugin.name, hook, exc)


# ---------------------------------------------------------------------------
# Single container
# ---------------------------------------------------------------------------

def parse_element(
    element: Tag,
    variant: str,
    *,
    document: BeautifulSoup | None = None,
    catalogue: SelectorCatalogue | None = None,
    replace: bool = False,
) -> Block | None:
    """Parse *element* as *variant*.

    With ``replace=True`` the element is swapped for the assembled table when
    the block has rows.  Returns None (and changes nothing) when no block was
    produced.

    Raises:
        UnknownVariantError: if no parser is registered for *variant*.
    """
    parser = get_parser(variant)
    block = parser.parse(element, document, catalogue or DEFAULT_CATALOGUE)
    if block is None or block.is_empty:
        return None
    if replace:
        replace_with_block(element, block, document)
    return block


def _is_attached(element: Tag, root: Tag) -> bool:
    return any(parent is root for parent in element.parents)


# ---------------------------------------------------------------------------
# Whole page
# ---------------------------------------------------------------------------

def import_html(
    html: str,
    blocks: Mapping[str, str] | None = None,
    *,
    url: str = "",
    catalogue: SelectorCatalogue | None = None,
    profile: Mapping[str, Any] | None = None,
) -> ImportResult:
    """Import one page.

    Args:
        html:      Raw HTML of the page.
        blocks:    ``CSS selector -> variant name``; every container matching
                   a selector is parsed as that variant.  Merged over the
                   profile's ``blocks``.
        url:       Page URL, carried into the result.
        catalogue: Selector catalogue (default: :data:`DEFAULT_CATALOGUE`
                   with the profile's overrides).
        profile:   Profile dict as returned by
                   :func:`~blockimport.profiles.load_profile`.

    Returns:
        :class:`ImportResult` with the transformed HTML of ``<body>`` and the
        blocks produced, in page order per selector.

    Raises:
        UnknownVariantError: if a mapping names a variant with no parser.
    """
    profile = dict(profile or {})
    block_map = blocks_from_profile(profile)
    block_map.update(blocks or {})
    if catalogue is None:
        catalogue = catalogue_from_profile(profile)

    # Fail on a bad mapping before the page is touched
    for variant in block_map.values():
        get_parser(variant)

    soup = BeautifulSoup(html, settings.HTML_PARSER)
    root: Tag = soup.body or soup

    run_transform_hook(settings.BEFORE_TRANSFORM, root, catalogue)

    produced: list[Block] = []
    skipped: list[SkippedContainer] = []
    for selector, variant in block_map.items():
        try:
            containers = root.select(selector)
        except SelectorSyntaxError as exc:
            logger.warning("Block selector %r failed: %s", selector, exc)
            skipped.append(SkippedContainer(selector=selector, variant=variant, reason="bad selector"))
            continue
        if not containers:
            logger.debug("No container matches %r (%s)", selector, variant)
        for container in containers:
            # A container inside an already replaced block is gone
            if not _is_attached(container, root):
                continue
            block = parse_element(
                container, variant, document=soup, catalogue=catalogue, replace=True,
            )
            if block is None:
                skipped.append(
                    SkippedContainer(selector=selector, variant=variant, reason="no content"),
                )
                continue
            logger.info("%s: %d row(s) from %r", block.name, len(block.rows), selector)
            produced.append(block)

    run_transform_hook(settings.AFTER_TRANSFORM, root, catalogue)

    return ImportResult(html=str(root), blocks=produced, skipped=skipped, url=url)


class BlockImporter:
    """Reusable importer bound to a profile and catalogue.

    Args:
        profile_path: Optional YAML profile; resolved per URL on each call.
        blocks:       Extra ``selector -> variant`` mappings for every page.
        catalogue:    Base selector catalogue (default catalogue if omitted).
    """

    def __init__(
        self,
        profile_path: str | Path | None = None,
        blocks: Mapping[str, str] | None = None,
        catalogue: SelectorCatalogue | None = None,
    ) -> None:
        self._profile_path = profile_path
        self._blocks = dict(blocks or {})
        self._catalogue = catalogue or DEFAULT_CATALOGUE

    def profile_for(self, url: str = "") -> dict[str, Any]:
        if self._profile_path is None:
            return {}
        return load_profile(self._profile_path, url)

    def import_html(self, html: str, url: str = "") -> ImportResult:
        """Import *html* with the profile settings that apply to *url*."""
        profile = self.profile_for(url)
        catalogue = catalogue_from_profile(profile, self._catalogue)
        return import_html(
            html, self._blocks, url=url, catalogue=catalogue, profile=profile,
        )
