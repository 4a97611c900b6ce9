"""blockimport - turn class-name-driven marketing HTML into normalized block tables.

Whole-page usage::

    from blockimport import import_html

    result = import_html(html, {
        'div[class*="Grid-md:grid-cols-5"]': "Cards-Article",
        "div.idsTSTabs": "Tabs-Video",
    })
    print(result.html)

Single container::

    from blockimport import parse_element

    block = parse_element(container, "Columns-Categories")
    print(block.name, block.rows)

Plugin extension points::

    from blockimport import register_transformer

    class DropPromos:
        name = "drop_promos"
        def transform(self, hook, element):
            if hook == "beforeTransform":
                for el in element.select(".promo"):
                    el.decompose()

    register_transformer(DropPromos())
"""

from blockimport.assembler import create_block_table, replace_with_block
from blockimport.extractors.labels import normalize_label
from blockimport.extractors.urlnorm import resolve_embed_url
from blockimport.importer import BlockImporter, ImportResult, import_html, parse_element
from blockimport.items import Block
from blockimport.plugins import register_parser, register_transformer
from blockimport.profiles import ProfileError, load_profile
from blockimport.selectors import (
    DEFAULT_CATALOGUE,
    VARIANT_NAMES,
    SelectorCatalogue,
    UnknownVariantError,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CATALOGUE",
    "VARIANT_NAMES",
    "Block",
    "BlockImporter",
    "ImportResult",
    "ProfileError",
    "SelectorCatalogue",
    "UnknownVariantError",
    "create_block_table",
    "import_html",
    "load_profile",
    "normalize_label",
    "parse_element",
    "register_parser",
    "register_transformer",
    "replace_with_block",
    "resolve_embed_url",
]
