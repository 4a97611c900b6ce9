"""Shipped block parsers, one module per variant."""

from blockimport.plugins import register_builtin_parser

from . import (
    cards_article,
    cards_author,
    cards_calculator,
    carousel_articles,
    columns_categories,
    tabs_video,
)
from .base import BlockParser

for _module in (
    cards_article,
    cards_author,
    cards_calculator,
    carousel_articles,
    columns_categories,
    tabs_video,
):
    register_builtin_parser(_module.parser)

__all__ = [
    "BlockParser",
    "cards_article",
    "cards_author",
    "cards_calculator",
    "carousel_articles",
    "columns_categories",
    "tabs_video",
]
