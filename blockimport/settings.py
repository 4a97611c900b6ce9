"""Project-wide settings for blockimport.

Plain module constants, read by the importer and the CLI.  Values here are
defaults only; the CLI overrides the logging level and output format per run.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
# Tree builder handed to BeautifulSoup for whole pages and scratch documents.
HTML_PARSER = "lxml"

# ---------------------------------------------------------------------------
# Hook names (shared with transformer plugins)
# ---------------------------------------------------------------------------
BEFORE_TRANSFORM = "beforeTransform"
AFTER_TRANSFORM = "afterTransform"

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
OUTPUT_FORMATS: tuple[str, ...] = ("html", "json")
DEFAULT_OUTPUT_FORMAT = "html"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
