"""Extract the branching flowchart from a Branching options screen."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from forms2mermaid.config import (
    FORMS2MERMAID_HTML_PARSER,
    FORMS2MERMAID_SCREEN_HEADING,
    FORMS2MERMAID_THEME_PROPERTY,
)
from forms2mermaid.exceptions import ParseError, ResolutionError, ScreenNotFoundError
from forms2mermaid.form_parser import parse_form
from forms2mermaid.html_utils import document_title, element_text, inline_style_property
from forms2mermaid.mermaid import serialize_form
from forms2mermaid.schemas import DiagramResult

logger = logging.getLogger(__name__)

HEADING_SELECTOR = "span[role='heading']"
HEADING_MISSING_MESSAGE = "Not on Branching Options screen (check 1)"
HEADING_MISMATCH_MESSAGE = "Not on Branching Options screen (check 2)"


def extract_branching(html: str | BeautifulSoup) -> DiagramResult:
    """Parse the editor screen and return the flowchart or an error record.

    This never raises for screen or structure problems; those become
    ``Error`` results whose message the host shows as-is.
    """
    soup = html if isinstance(html, BeautifulSoup) else BeautifulSoup(html, FORMS2MERMAID_HTML_PARSER)

    try:
        check_branching_screen(soup)
        form = parse_form(soup)
        diagram_text = serialize_form(form)
    except ScreenNotFoundError as exc:
        logger.warning("%s", exc)
        return DiagramResult.failure(str(exc))
    except ParseError as exc:
        logger.warning("Unsupported form structure: %s", exc)
        return DiagramResult.failure(f"Form structure not recognised: {exc}")
    except ResolutionError as exc:
        logger.warning("Unresolved destination: %s", exc)
        return DiagramResult.failure(f"Unresolved branch destination: {exc}")

    return DiagramResult.success(
        title=document_title(soup),
        text=diagram_text,
        theme_primary_color=inline_style_property(soup, FORMS2MERMAID_THEME_PROPERTY),
    )


def check_branching_screen(soup: BeautifulSoup) -> None:
    """Raise ``ScreenNotFoundError`` unless this is the Branching options screen."""
    heading = soup.select_one(HEADING_SELECTOR)
    if heading is None:
        raise ScreenNotFoundError(HEADING_MISSING_MESSAGE)
    if element_text(heading) != FORMS2MERMAID_SCREEN_HEADING:
        raise ScreenNotFoundError(HEADING_MISMATCH_MESSAGE)
