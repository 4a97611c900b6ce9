"""Extraction sub-package: cleanup passes, unit cascades and field helpers."""

from .cleanup import after_transform, before_transform
from .labels import normalize_label
from .locator import locate, locate_first
from .urlnorm import resolve_embed_url

__all__ = [
    "after_transform",
    "before_transform",
    "locate",
    "locate_first",
    "normalize_label",
    "resolve_embed_url",
]
