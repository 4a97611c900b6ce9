"""Versioned selector catalogue.

Maps each block variant to the ordered structural patterns used to find its
units and fields, plus the node/attribute lists of the cleanup passes.  Every
list is a priority cascade: the first pattern that matches wins.

Source markup changes independently of the extraction logic, so the catalogue
is plain data.  Profiles (see :mod:`blockimport.profiles`) override any part of
it with :meth:`SelectorCatalogue.merged`::

    from blockimport.selectors import DEFAULT_CATALOGUE

    catalogue = DEFAULT_CATALOGUE.merged(
        {"variants": {"Cards-Author": {"fields": {"role": ["p.role"]}}}},
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

CATALOGUE_VERSION = "2026-02-27"

# Variant names expected by the downstream document pipeline
CARDS_ARTICLE = "Cards-Article"
CARDS_AUTHOR = "Cards-Author"
CARDS_CALCULATOR = "Cards-Calculator"
CAROUSEL_ARTICLES = "Carousel-Articles"
COLUMNS_CATEGORIES = "Columns-Categories"
TABS_VIDEO = "Tabs-Video"

VARIANT_NAMES: tuple[str, ...] = (
    CARDS_ARTICLE,
    CARDS_AUTHOR,
    CARDS_CALCULATOR,
    CAROUSEL_ARTICLES,
    COLUMNS_CATEGORIES,
    TABS_VIDEO,
)


class UnknownVariantError(KeyError):
    """Raised when a block variant has no parser or no catalogue entry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown block variant: {self.name!r}"


def _as_list(v: Any) -> Any:
    if isinstance(v, str):
        return [v]
    return v


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class CleanupSelectors(BaseModel):
    """Node and attribute lists used by the cleanup passes."""

    remove_before: list[str] = Field(default_factory=list)
    remove_after: list[str] = Field(default_factory=list)
    strip_attributes: list[str] = Field(default_factory=list)
    # Post-pass sweeps remove_before again before its own list
    resweep: bool = True

    @field_validator("remove_before", "remove_after", "strip_attributes", mode="before")
    @classmethod
    def coerce_lists(cls, v: Any) -> Any:
        return _as_list(v)


class VariantSelectors(BaseModel):
    """Unit cascade, per-field cascades and keyword gates for one variant."""

    units: list[str] = Field(default_factory=list)
    fields: dict[str, list[str]] = Field(default_factory=dict)
    keywords: dict[str, str] = Field(default_factory=dict)

    @field_validator("units", mode="before")
    @classmethod
    def coerce_units(cls, v: Any) -> Any:
        return _as_list(v)

    @field_validator("fields", mode="before")
    @classmethod
    def coerce_fields(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {k: _as_list(p) for k, p in v.items()}
        return v

    def field(self, name: str) -> list[str]:
        """Return the pattern cascade for field *name* (empty if unset)."""
        return list(self.fields.get(name, []))

    def keyword(self, name: str, default: str = "") -> str:
        return self.keywords.get(name, default)


class SelectorCatalogue(BaseModel):
    version: str = CATALOGUE_VERSION
    cleanup: CleanupSelectors = Field(default_factory=CleanupSelectors)
    variants: dict[str, VariantSelectors] = Field(default_factory=dict)

    def for_variant(self, name: str) -> VariantSelectors:
        """Return the selectors for *name*.

        Raises:
            UnknownVariantError: if the catalogue has no entry for *name*.
        """
        try:
            return self.variants[name]
        except KeyError:
            raise UnknownVariantError(name) from None

    def merged(self, overrides: Mapping[str, Any] | None) -> SelectorCatalogue:
        """Return a new catalogue with *overrides* deep-merged on top.

        Mappings merge key by key; lists and scalars replace the old value.
        """
        if not overrides:
            return self
        data = deep_merge(self.model_dump(), dict(overrides))
        return SelectorCatalogue.model_validate(data)


def deep_merge(base: dict[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


# ---------------------------------------------------------------------------
# Default catalogue
# ---------------------------------------------------------------------------

_DEMI_LINK = 'a[class*="Link-font-demi-link"]'
_GRID_ITEM = '[class*="GridItem-order"]'
# Generic fallback: a direct child block that carries an image
_IMAGE_CHILD = ":scope > div:has(img)"
_BODY_TEXT = 'p[class*="body03"][class*="font-regular"]'

DEFAULT_CLEANUP = CleanupSelectors(
    remove_before=[
        # consent / cookie banners
        '[class*="cookie"]',
        '[class*="consent"]',
        '[id*="cookie"]',
        '[id*="consent"]',
        '[class*="CookieBanner"]',
        '[class*="ConsentBanner"]',
        # site chrome
        "header",
        "nav",
        "footer",
        # scripts and styles
        "script",
        "style",
        'link[rel="stylesheet"]',
        "noscript",
        # tracking frames; video players stay for the tabs parser
        'iframe:not([src*="youtube"])',
        "[data-analytics]",
        # identity-provider modal
        "#ius-hosted-ui",
        ".ius-hosted-ui-container",
        # skip links
        'a[href="#mainContent"]',
        "a.Header-skipLink-7ad2311",
        # carousel controls
        ".navigation__container",
        ".glide__arrowContainer",
        ".glide__bulletsContainer",
    ],
    remove_after=[
        "noscript",
        "link",
        "source",
        '[class*="Footer"]',
        "iframe",
    ],
    strip_attributes=[
        "data-theme",
        "data-track",
        "data-testid",
        "data-analytics",
    ],
)

DEFAULT_VARIANTS: dict[str, VariantSelectors] = {
    CARDS_ARTICLE: VariantSelectors(
        units=['[class*="Pod-pod"]', _GRID_ITEM, _IMAGE_CHILD],
        fields={
            "media": ["img"],
            "category_link": [f"{_DEMI_LINK} h4"],
            "category_heading": ['h2[class*="body03"]'],
            "title": ['h4[class*="headline06"]'],
            "links": [_DEMI_LINK],
            "description": [_BODY_TEXT],
            "cta": [_DEMI_LINK],
        },
        keywords={"cta": "read"},
    ),
    CARDS_AUTHOR: VariantSelectors(
        units=[_GRID_ITEM, _IMAGE_CHILD],
        fields={
            "media": ["img"],
            "name": ['span[class*="headline06"]', 'span[class*="font-medium"]'],
            "role": ['p[class*="text-secondary"]'],
            "profile_link": ['a[href*="/authors/"]'],
            "links": [_DEMI_LINK],
        },
        keywords={"profile_link": "more about"},
    ),
    CARDS_CALCULATOR: VariantSelectors(
        units=[_GRID_ITEM, _IMAGE_CHILD],
        fields={
            "media": ["img"],
            "title": ['h4[class*="headline06"]', "h4"],
            "description": [_BODY_TEXT],
            "cta": [_DEMI_LINK],
        },
    ),
    CAROUSEL_ARTICLES: VariantSelectors(
        units=['.glide__slide, li[class*="glide__slide"]'],
        fields={
            "media": ["img"],
            "link": [f'{_DEMI_LINK}, a[href*="/tax-tips/"]'],
        },
    ),
    COLUMNS_CATEGORIES: VariantSelectors(
        units=[f':scope > div{_GRID_ITEM}'],
        fields={
            "heading": ['p[class*="body02"][class*="font-medium"]', "h4", "strong"],
            "links": [_DEMI_LINK],
        },
    ),
    TABS_VIDEO: VariantSelectors(
        units=['button[class*="Tabs-tabButton"]'],
        fields={
            "panel": ['div[class*="Tabs-tabPanel"]'],
            "label": ["strong"],
            "heading": ["h2, h3"],
            "browse_link": ['a[href*="youtube"]'],
            "embed": ['iframe[src*="youtube"]'],
        },
    ),
}

DEFAULT_CATALOGUE = SelectorCatalogue(cleanup=DEFAULT_CLEANUP, variants=DEFAULT_VARIANTS)
