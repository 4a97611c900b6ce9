"""blockimport.plugins: extension point registry for block parsers and
page transformers.

Usage::

    from blockimport import register_parser
    from blockimport.items import Block

    class HeroParser:
        name = "Hero"
        def parse(self, element, document=None, catalogue=None):
            img = element.find("img")
            return Block(self.name, [[img]]) if img else None

    register_parser(HeroParser())

Both plugin types follow ``runtime_checkable`` ``Protocol`` contracts so you
can use ``isinstance()`` checks in tests without inheriting from a base class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from blockimport.selectors import UnknownVariantError

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

    from blockimport.items import Block
    from blockimport.selectors import SelectorCatalogue

# ---------------------------------------------------------------------------
# Protocol definitions
# ---------------------------------------------------------------------------

@runtime_checkable
class BlockParserPlugin(Protocol):
    """Turns one container into a block; ``name`` is the variant it produces."""

    name: str

    def parse(
        self,
        element: Tag,
        document: BeautifulSoup | None = None,
        catalogue: SelectorCatalogue | None = None,
    ) -> Block | None:
        """Return the block for *element*, or None when it has no content."""
        ...


@runtime_checkable
class TransformerPlugin(Protocol):
    """Page-level hook run after the built-in cleanup pass of each hook."""

    name: str

    def transform(self, hook: str, element: Tag) -> None:
        """Mutate *element* in place for ``"beforeTransform"``/``"afterTransform"``."""
        ...


# ---------------------------------------------------------------------------
# Module-level registry
# ---------------------------------------------------------------------------

_builtin_parsers: dict[str, Any] = {}

_registry: dict[str, Any] = {
    "parsers": {},
    "transformers": [],
}


# ---------------------------------------------------------------------------
# Registration helpers
# ---------------------------------------------------------------------------

def register_builtin_parser(plugin: BlockParserPlugin) -> None:
    """Register one of the shipped parsers (not affected by :func:`clear_plugins`)."""
    _builtin_parsers[plugin.name] = plugin


def register_parser(plugin: BlockParserPlugin) -> None:
    """Register a custom :class:`BlockParserPlugin`.

    A custom parser with a built-in variant name takes precedence over it.
    """
    _registry["parsers"][plugin.name] = plugin


def register_transformer(plugin: TransformerPlugin) -> None:
    """Register a custom :class:`TransformerPlugin`."""
    _registry["transformers"].append(plugin)


# ---------------------------------------------------------------------------
# Accessor helpers
# ---------------------------------------------------------------------------

def get_parser(name: str) -> BlockParserPlugin:
    """Return the parser for variant *name*, custom parsers first.

    Raises:
        UnknownVariantError: if no parser is registered under *name*.
    """
    # Importing the package registers the shipped parsers
    import blockimport.parsers  # noqa: F401

    plugin = _registry["parsers"].get(name) or _builtin_parsers.get(name)
    if plugin is None:
        raise UnknownVariantError(name)
    return plugin


def get_parsers() -> dict[str, BlockParserPlugin]:
    """Return every available parser keyed by variant name."""
    import blockimport.parsers  # noqa: F401

    merged = dict(_builtin_parsers)
    merged.update(_registry["parsers"])
    return merged


def get_transformers() -> list[TransformerPlugin]:
    """Return all registered transformer plugins, in registration order."""
    return list(_registry["transformers"])


def clear_plugins() -> None:
    """Remove all custom plugins. Primarily for use in tests."""
    _registry["parsers"].clear()
    _registry["transformers"].clear()
