"""Embed-source URL canonicalization."""

from __future__ import annotations

import re

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"

# First video of an embedded playlist: playlist=<id> up to "&", "," or end
_PLAYLIST_RE = re.compile(r"playlist=([^&,]+)")


def extract_playlist_id(src: str) -> str | None:
    """Return the first ``playlist`` value in *src*, or None if absent."""
    if not src:
        return None
    m = _PLAYLIST_RE.search(src)
    return m.group(1) if m else None


def resolve_embed_url(src: str) -> str:
    """Map a player embed source to a canonical watch URL.

    Example:
        https://www.youtube.com/embed/?playlist=abc123,def456
        → https://www.youtube.com/watch?v=abc123

    When *src* has no ``playlist`` parameter it is returned unchanged.
    """
    video_id = extract_playlist_id(src)
    if video_id is None:
        return src
    return WATCH_URL_TEMPLATE.format(video_id=video_id)
