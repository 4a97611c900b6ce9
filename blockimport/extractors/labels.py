"""Tab label case folding."""

from __future__ import annotations

import re

# Start of a whitespace-delimited word: leading punctuation, then its first
# word character
_WORD_START_RE = re.compile(r"(^|\s)([^\w\s]*)(\w)")


def is_all_caps(text: str) -> bool:
    """True when *text* equals its own upper-cased form.

    Strings without letters (``"2024"``) count as all caps; lower/title casing
    leaves them unchanged anyway.
    """
    return text == text.upper()


def normalize_label(text: str) -> str:
    """Title-case an ALL CAPS label; leave any other label untouched.

    ``"TAXES"`` → ``"Taxes"``, ``"TAX BASICS"`` → ``"Tax Basics"``,
    ``"TurboTax Live"`` → ``"TurboTax Live"``.  Single characters pass
    through as-is.
    """
    if len(text) <= 1 or not is_all_caps(text):
        return text
    return _WORD_START_RE.sub(
        lambda m: m.group(1) + m.group(2) + m.group(3).upper(),
        text.lower(),
    )
