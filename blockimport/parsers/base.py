"""Common driver for block parsers.

A parser locates candidate units with its variant's cascade, extracts one row
per unit and wraps the rows in a :class:`~blockimport.items.Block`.  A unit
that raises is logged and skipped so one malformed card never costs the rest
of the container its rows.
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import new_document
from blockimport.extractors.locator import locate
from blockimport.items import Block, Row
from blockimport.selectors import DEFAULT_CATALOGUE, SelectorCatalogue, VariantSelectors

logger = logging.getLogger(__name__)


class BlockParser:
    """Locate units, extract rows, build the block."""

    name: str = ""

    def units(self, element: Tag, selectors: VariantSelectors) -> list[Any]:
        return locate(element, selectors.units)

    def extract_unit(
        self,
        unit: Any,
        document: BeautifulSoup,
        selectors: VariantSelectors,
    ) -> Row | None:
        raise NotImplementedError

    def build_rows(self, extracted: list[Row]) -> list[Row]:
        return extracted

    def parse(
        self,
        element: Tag,
        document: BeautifulSoup | None = None,
        catalogue: SelectorCatalogue | None = None,
    ) -> Block | None:
        """Return the block for *element*, or None when nothing was extracted."""
        selectors = (catalogue or DEFAULT_CATALOGUE).for_variant(self.name)
        doc = document if document is not None else new_document()

        units = self.units(element, selectors)
        if not units:
            logger.info("%s: no units found, block skipped", self.name)
            return None

        extracted: list[Row] = []
        for index, unit in enumerate(units):
            try:
                row = self.extract_unit(unit, doc, selectors)
            except Exception as exc:
                logger.warning("%s: unit %d failed: %s", self.name, index, exc)
                continue
            if row is None:
                logger.debug("%s: unit %d dropped", self.name, index)
                continue
            extracted.append(row)

        rows = self.build_rows(extracted)
        if not rows:
            logger.info("%s: %d unit(s) but no rows, block skipped", self.name, len(units))
            return None
        logger.debug("%s: %d row(s) from %d unit(s)", self.name, len(rows), len(units))
        return Block(self.name, rows)
