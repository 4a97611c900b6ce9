"""Tests for YAML profile loading and catalogue overrides."""

from __future__ import annotations

import pytest

from blockimport.profiles import (
    ProfileError,
    blocks_from_profile,
    catalogue_from_profile,
    load_profile,
)
from blockimport.selectors import DEFAULT_CATALOGUE, SelectorCatalogue, UnknownVariantError

PROFILE_YAML = """\
default:
  blocks:
    div.glide: Carousel-Articles
  selectors:
    variants:
      Cards-Author:
        fields:
          role: p.role
domains:
  intuit.com:
    blocks:
      div.tabs: Tabs-Video
  turbotax.intuit.com:
    blocks:
      div.idsTSTabs: Tabs-Video
    selectors:
      cleanup:
        resweep: false
"""


@pytest.fixture
def profile_path(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text(PROFILE_YAML, encoding="utf-8")
    return path


class TestLoadProfile:
    def test_default_only(self, profile_path):
        profile = load_profile(profile_path, "https://example.com/page")
        assert profile["blocks"] == {"div.glide": "Carousel-Articles"}
        assert profile["selectors"]["variants"]["Cards-Author"]["fields"]["role"] == "p.role"

    def test_longest_domain_suffix_wins(self, profile_path):
        profile = load_profile(profile_path, "https://turbotax.intuit.com/tax-tips/")
        assert profile["blocks"] == {
            "div.glide": "Carousel-Articles",
            "div.idsTSTabs": "Tabs-Video",
        }
        assert profile["selectors"]["cleanup"] == {"resweep": False}
        assert "variants" in profile["selectors"]

    def test_parent_domain_matches_subdomain(self, profile_path):
        profile = load_profile(profile_path, "https://www.intuit.com/")
        assert profile["blocks"]["div.tabs"] == "Tabs-Video"

    def test_suffix_must_be_label_boundary(self, profile_path):
        profile = load_profile(profile_path, "https://notintuit.com/")
        assert "div.tabs" not in profile["blocks"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_profile(path) == {"blocks": {}, "selectors": {}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ProfileError):
            load_profile(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("default: [unclosed\n", encoding="utf-8")
        with pytest.raises(ProfileError):
            load_profile(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ProfileError):
            load_profile(path)

    def test_blocks_must_be_mapping(self, tmp_path):
        path = tmp_path / "blocks.yaml"
        path.write_text("default:\n  blocks:\n    - div.glide\n", encoding="utf-8")
        with pytest.raises(ProfileError):
            load_profile(path)


class TestCatalogueFromProfile:
    def test_override_applied(self, profile_path):
        profile = load_profile(profile_path, "https://turbotax.intuit.com/")
        catalogue = catalogue_from_profile(profile)
        assert isinstance(catalogue, SelectorCatalogue)
        assert catalogue.for_variant("Cards-Author").field("role") == ["p.role"]
        assert catalogue.cleanup.resweep is False
        # untouched parts keep their defaults
        assert catalogue.for_variant("Cards-Author").field("name") == (
            DEFAULT_CATALOGUE.for_variant("Cards-Author").field("name")
        )
        assert catalogue.cleanup.remove_before == DEFAULT_CATALOGUE.cleanup.remove_before

    def test_default_catalogue_unchanged(self, profile_path):
        catalogue_from_profile(load_profile(profile_path, "https://turbotax.intuit.com/"))
        assert DEFAULT_CATALOGUE.cleanup.resweep is True

    def test_no_overrides_returns_base(self):
        assert catalogue_from_profile({}) is DEFAULT_CATALOGUE

    def test_invalid_override(self):
        with pytest.raises(ProfileError):
            catalogue_from_profile({"selectors": {"cleanup": {"resweep": "sometimes"}}})

    def test_new_variant_entry(self):
        catalogue = catalogue_from_profile(
            {"selectors": {"variants": {"Hero": {"units": "section.hero"}}}}
        )
        assert catalogue.for_variant("Hero").units == ["section.hero"]
        with pytest.raises(UnknownVariantError):
            DEFAULT_CATALOGUE.for_variant("Hero")


class TestBlocksFromProfile:
    def test_stringified(self):
        assert blocks_from_profile({"blocks": {"div.a": "Cards-Article"}}) == {
            "div.a": "Cards-Article"
        }

    def test_missing(self):
        assert blocks_from_profile({}) == {}
