"""YAML-based import profiles.

A profile says which containers on a page become which blocks, and may
override parts of the selector catalogue::

    default:
      blocks:
        'div[class*="Grid-xl:grid-cols-4"]': Cards-Author
    domains:
      turbotax.intuit.com:
        blocks:
          div.idsTSTabs: Tabs-Video
        selectors:
          variants:
            Tabs-Video:
              fields:
                heading: [h2]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from blockimport.selectors import DEFAULT_CATALOGUE, SelectorCatalogue, deep_merge


class ProfileError(ValueError):
    """Raised when a profile file cannot be read or has the wrong shape."""


def load_profile(path: str | Path, url: str = "") -> dict[str, Any]:
    """Load YAML profile and return merged settings for the given URL.

    ``blocks`` and ``selectors`` of the best matching domain (longest suffix
    match on the host) are merged over ``default``.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ProfileError(f"Cannot load profile {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path} must be a mapping, got {type(data).__name__}")

    default = data.get("default", {}) if isinstance(data.get("default"), dict) else {}
    domains = data.get("domains", {}) if isinstance(data.get("domains"), dict) else {}

    netloc = urlparse(url).netloc.lower()
    best_key = ""
    best_cfg: dict[str, Any] = {}
    for key, cfg in domains.items():
        if not isinstance(key, str) or not isinstance(cfg, dict):
            continue
        key_lower = key.lower()
        if (netloc == key_lower or netloc.endswith("." + key_lower)) and (
            len(key_lower) > len(best_key)
        ):
            best_key = key_lower
            best_cfg = cfg

    merged: dict[str, Any] = {"blocks": {}, "selectors": {}}
    for cfg in (default, best_cfg):
        blocks = cfg.get("blocks") or {}
        selectors = cfg.get("selectors") or {}
        if not isinstance(blocks, dict) or not isinstance(selectors, dict):
            raise ProfileError(f"Profile {path}: 'blocks' and 'selectors' must be mappings")
        merged["blocks"].update(blocks)
        merged["selectors"] = deep_merge(merged["selectors"], selectors)
    return merged


def catalogue_from_profile(
    profile: dict[str, Any],
    base: SelectorCatalogue | None = None,
) -> SelectorCatalogue:
    """Apply the profile's ``selectors`` overrides to *base* (default catalogue)."""
    catalogue = base or DEFAULT_CATALOGUE
    try:
        return catalogue.merged(profile.get("selectors") or {})
    except ValueError as exc:
        raise ProfileError(f"Invalid selector overrides: {exc}") from exc


def blocks_from_profile(profile: dict[str, Any]) -> dict[str, str]:
    """Return the ``selector -> variant`` map of *profile*."""
    return {str(k): str(v) for k, v in (profile.get("blocks") or {}).items()}
