"""Local configuration for forms2mermaid."""

from __future__ import annotations

import os


DEFAULT_SCREEN_HEADING = "Branching options"
DEFAULT_HTML_PARSER = "lxml"
DEFAULT_THEME_PROPERTY = "--primary-color"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FETCH_TIMEOUT_S = 15.0
DEFAULT_USER_AGENT = "forms2mermaid/0.1"

# Text of the heading that identifies the editor screen we can read.
FORMS2MERMAID_SCREEN_HEADING = os.getenv("FORMS2MERMAID_SCREEN_HEADING", DEFAULT_SCREEN_HEADING)
FORMS2MERMAID_HTML_PARSER = os.getenv("FORMS2MERMAID_HTML_PARSER", DEFAULT_HTML_PARSER)
FORMS2MERMAID_THEME_PROPERTY = os.getenv("FORMS2MERMAID_THEME_PROPERTY", DEFAULT_THEME_PROPERTY)
FORMS2MERMAID_LOG_LEVEL = os.getenv("FORMS2MERMAID_LOG_LEVEL", DEFAULT_LOG_LEVEL)
FORMS2MERMAID_FETCH_TIMEOUT_S = float(os.getenv("FORMS2MERMAID_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
FORMS2MERMAID_USER_AGENT = os.getenv("FORMS2MERMAID_USER_AGENT", DEFAULT_USER_AGENT)
