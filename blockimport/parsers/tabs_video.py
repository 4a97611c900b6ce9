"""Tabs-Video: tab triggers paired with their video panels.

Rows are ``[label, content]``.  The label is the trigger text with ALL CAPS
folded to title case; the content is the bold panel heading, the "browse"
link and the canonical watch URL of the embedded player.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from blockimport.extractors.fields import Fragment, text_of
from blockimport.extractors.labels import normalize_label
from blockimport.extractors.locator import locate, locate_first
from blockimport.extractors.urlnorm import resolve_embed_url
from blockimport.items import Row
from blockimport.parsers.base import BlockParser
from blockimport.selectors import TABS_VIDEO, VariantSelectors

logger = logging.getLogger(__name__)

_PANEL_ID_SUFFIX = "-tabPanel"


def _named_panel(
    trigger: Tag,
    by_id: dict[str, Tag],
    by_labelledby: dict[str, Tag],
    id_convention: bool,
) -> tuple[bool, Tag | None]:
    """Return ``(names_a_panel, panel)`` for *trigger*.

    *panel* is None when the trigger names a panel the container lacks.
    """
    controls = trigger.get("aria-controls")
    if isinstance(controls, str) and controls:
        return True, by_id.get(controls)
    trigger_id = trigger.get("id")
    if not isinstance(trigger_id, str) or not trigger_id:
        return False, None
    panel = by_labelledby.get(trigger_id) or by_id.get(trigger_id + _PANEL_ID_SUFFIX)
    if panel is not None:
        return True, panel
    # Panel ids follow <trigger id>-tabPanel and this trigger has none
    return id_convention, None


def pair_tabs(triggers: list[Tag], panels: list[Tag]) -> list[tuple[Tag, Tag]]:
    """Pair each trigger with its panel, in trigger order.

    A panel named by the trigger (``aria-controls``, ``aria-labelledby`` or the
    ``<id>-tabPanel`` convention) wins.  Triggers naming nothing take the
    panels no other trigger claimed, in order.  A trigger whose named panel is
    absent, or that is left over, is dropped.
    """
    by_id = {p["id"]: p for p in panels if isinstance(p.get("id"), str)}
    by_labelledby = {
        p["aria-labelledby"]: p for p in panels if isinstance(p.get("aria-labelledby"), str)
    }
    id_convention = any(key.endswith(_PANEL_ID_SUFFIX) for key in by_id)

    # Tag equality is structural; claims are tracked by identity
    claimed: set[int] = set()
    resolved: list[Tag | None] = []
    unnamed: list[int] = []
    for index, trigger in enumerate(triggers):
        named, panel = _named_panel(trigger, by_id, by_labelledby, id_convention)
        if not named:
            unnamed.append(index)
            resolved.append(None)
            continue
        if panel is None or id(panel) in claimed:
            logger.debug("Tab trigger %d names a missing or taken panel, dropped", index)
            resolved.append(None)
            continue
        claimed.add(id(panel))
        resolved.append(panel)

    free = iter(p for p in panels if id(p) not in claimed)
    for index in unnamed:
        resolved[index] = next(free, None)
        if resolved[index] is None:
            logger.debug("Tab trigger %d has no panel, dropped", index)

    return [(t, p) for t, p in zip(triggers, resolved) if p is not None]


def tab_label(trigger: Tag, selectors: VariantSelectors) -> str:
    label_el = locate_first(trigger, selectors.field("label"))
    return normalize_label(text_of(label_el if label_el is not None else trigger))


class VideoTabsParser(BlockParser):
    name = TABS_VIDEO

    def units(self, element: Tag, selectors: VariantSelectors) -> list[tuple[Tag, Tag]]:
        triggers = locate(element, selectors.units)
        panels = locate(element, selectors.field("panel"))
        return pair_tabs(triggers, panels)

    def extract_unit(
        self,
        unit: tuple[Tag, Tag],
        document: BeautifulSoup,
        selectors: VariantSelectors,
    ) -> Row | None:
        trigger, panel = unit
        content = Fragment(document)

        heading = locate_first(panel, selectors.field("heading"))
        if heading is not None:
            content.add_bold(text_of(heading))

        browse = locate_first(panel, selectors.field("browse_link"))
        if browse is not None:
            content.add_link(browse)

        embed = locate_first(panel, selectors.field("embed"))
        if embed is not None:
            src = str(embed.get("src") or "").strip()
            content.add_url(resolve_embed_url(src))

        return [tab_label(trigger, selectors), content.tag]


parser = VideoTabsParser()
parse = parser.parse
