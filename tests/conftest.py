"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from blockimport.plugins import clear_plugins

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# selector -> variant map for tax_tips_page.html
PAGE_BLOCKS: dict[str, str] = {
    'div[class*="Grid-md:grid-cols-5"]': "Cards-Article",
    'div[class*="Grid-xl:grid-cols-4"]': "Cards-Author",
    'div[class*="Grid-grid-rows-fr1"]': "Cards-Calculator",
    "div.glide": "Carousel-Articles",
    'div[class*="Grid-md:grid-cols-4-424283f"]': "Columns-Categories",
    "div.idsTSTabs": "Tabs-Video",
}


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def page_html() -> str:
    return _read_fixture("tax_tips_page.html")


@pytest.fixture
def page_blocks() -> dict[str, str]:
    return dict(PAGE_BLOCKS)


@pytest.fixture(autouse=True)
def _reset_plugins():
    clear_plugins()
    yield
    clear_plugins()
