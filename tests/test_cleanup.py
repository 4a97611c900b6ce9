"""Tests for the pre/post cleanup passes."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup, Tag

from blockimport.extractors.cleanup import (
    after_transform,
    before_transform,
    remove_nodes,
    strip_attributes,
)
from blockimport.selectors import DEFAULT_CATALOGUE

NOISY_HTML = """<html><body>
<a href="#mainContent" class="Header-skipLink-7ad2311">Skip</a>
<div class="cookie-banner">Cookies!</div>
<div id="consent-modal">Consent</div>
<div class="CookieBanner-x">Banner</div>
<header><nav><a href="/">Home</a></nav></header>
<nav class="breadcrumbs">Crumbs</nav>
<script>window.x = 1;</script>
<style>p { color: red; }</style>
<div class="assets"><link rel="stylesheet" href="/a.css"><link rel="preload" href="/font.woff2"></div>
<noscript>No JS</noscript>
<iframe src="https://tracker.example.com/pixel"></iframe>
<div class="video"><iframe src="https://www.youtube.com/embed/?playlist=abc"></iframe></div>
<div data-analytics="promo">Tracked</div>
<div id="ius-hosted-ui">Sign in</div>
<div class="ius-hosted-ui-container">Modal</div>
<div class="glide"><div class="glide__arrowContainer">arrows</div><div class="glide__bulletsContainer">dots</div>
<div class="navigation__container index-navigation__container-5d4c7a0">nav</div></div>
<main data-theme="turbotax">
  <p id="keep" data-track="x" data-testid="t" class="body03">Keep me</p>
  <picture><source srcset="/img/a.webp"></source><img src="/img/a.png" data-testid="img"></picture>
</main>
<footer>Footer</footer>
<div class="Footer-legal">Legal</div>
</body></html>"""


def _soup(html: str = NOISY_HTML) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


# ---------------------------------------------------------------------------
# Pre-pass
# ---------------------------------------------------------------------------

class TestBeforeTransform:
    def test_removes_consent_banners(self):
        soup = _soup()
        before_transform(soup)
        assert soup.select_one(".cookie-banner") is None
        assert soup.select_one("#consent-modal") is None
        assert soup.select_one('[class*="CookieBanner"]') is None

    def test_removes_site_chrome(self):
        soup = _soup()
        before_transform(soup)
        assert soup.find("header") is None
        assert soup.find("nav") is None
        assert soup.find("footer") is None

    def test_removes_scripts_and_styles(self):
        soup = _soup()
        before_transform(soup)
        assert soup.find("script") is None
        assert soup.find("style") is None
        assert soup.find("noscript") is None
        assert soup.select_one('link[rel="stylesheet"]') is None

    def test_removes_tracking_frames_but_keeps_players(self):
        soup = _soup()
        before_transform(soup)
        frames = soup.find_all("iframe")
        assert len(frames) == 1
        assert "youtube" in frames[0]["src"]

    def test_removes_analytics_and_identity_modal(self):
        soup = _soup()
        before_transform(soup)
        assert soup.select_one("[data-analytics]") is None
        assert soup.select_one("#ius-hosted-ui") is None
        assert soup.select_one(".ius-hosted-ui-container") is None

    def test_removes_skip_link_and_carousel_controls(self):
        soup = _soup()
        before_transform(soup)
        assert soup.select_one('a[href="#mainContent"]') is None
        assert soup.select_one(".glide__arrowContainer") is None
        assert soup.select_one(".glide__bulletsContainer") is None
        assert soup.select_one(".navigation__container") is None
        assert soup.select_one(".glide") is not None

    def test_keeps_content_and_attributes(self):
        soup = _soup()
        before_transform(soup)
        keep = soup.select_one("#keep")
        assert keep is not None
        assert keep.get_text() == "Keep me"
        assert keep["data-track"] == "x"

    def test_zero_matches_is_fine(self):
        soup = _soup("<html><body><div><p>Plain</p></div></body></html>")
        before = str(soup)
        before_transform(soup)
        assert str(soup) == before


# ---------------------------------------------------------------------------
# Post-pass
# ---------------------------------------------------------------------------

class TestAfterTransform:
    def test_strips_tracking_attributes_everywhere(self):
        soup = _soup()
        before_transform(soup)
        after_transform(soup)
        for name in ("data-theme", "data-track", "data-testid", "data-analytics"):
            assert soup.select_one(f"[{name}]") is None
        keep = soup.select_one("#keep")
        assert keep is not None
        assert keep["class"] == ["body03"]

    def test_removes_residual_wrappers(self):
        soup = _soup()
        before_transform(soup)
        after_transform(soup)
        assert soup.find("source") is None
        assert soup.find("link") is None
        assert soup.select_one('[class*="Footer"]') is None
        assert soup.find("img") is not None

    def test_removes_leftover_frames(self):
        soup = _soup()
        before_transform(soup)
        after_transform(soup)
        assert soup.find("iframe") is None

    def test_resweeps_pre_pass_selectors(self):
        soup = _soup("<html><body><div class='cookie-note'>c</div><p>x</p></body></html>")
        after_transform(soup)
        assert soup.select_one(".cookie-note") is None

    def test_resweep_can_be_disabled(self):
        catalogue = DEFAULT_CATALOGUE.merged({"cleanup": {"resweep": False}})
        soup = _soup("<html><body><div class='cookie-note'>c</div><p>x</p></body></html>")
        after_transform(soup, catalogue)
        assert soup.select_one(".cookie-note") is not None

    def test_strips_root_attributes(self):
        soup = _soup("<html><body><div data-theme='t' data-track='y'><p>x</p></div></body></html>")
        root = soup.body.div
        after_transform(root)
        assert "data-theme" not in root.attrs
        assert "data-track" not in root.attrs


# ---------------------------------------------------------------------------
# Idempotence and tolerance
# ---------------------------------------------------------------------------

class TestIdempotence:
    def test_before_twice(self):
        soup = _soup()
        before_transform(soup)
        once = str(soup)
        before_transform(soup)
        assert str(soup) == once

    def test_after_twice(self):
        soup = _soup()
        before_transform(soup)
        after_transform(soup)
        once = str(soup)
        after_transform(soup)
        assert str(soup) == once

    def test_nested_matches_removed_once(self):
        soup = _soup("<html><body><header><nav><nav>x</nav></nav></header></body></html>")
        removed = remove_nodes(soup, ["header", "nav"])
        assert removed == 1
        assert soup.find("nav") is None

    def test_invalid_selector_is_skipped(self):
        soup = _soup("<html><body><script>x</script><p>y</p></body></html>")
        removed = remove_nodes(soup, ["[[[", "script"])
        assert removed == 1
        assert soup.find("script") is None

    def test_strip_attributes_without_names(self):
        soup = _soup("<html><body><p data-track='x'>y</p></body></html>")
        strip_attributes(soup, [])
        assert soup.p["data-track"] == "x"

    def test_non_selector_errors_propagate(self, monkeypatch):
        soup = _soup("<html><body><script>x</script></body></html>")

        def broken_select(self, selector, *args, **kwargs):
            raise RuntimeError("select exploded")

        monkeypatch.setattr(Tag, "select", broken_select)
        with pytest.raises(RuntimeError):
            remove_nodes(soup, ["script"])
