"""Test setup for forms2mermaid."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from builders import page_html, question_html, section_html  # noqa: E402


@pytest.fixture
def flat_form_html() -> str:
    """Three questions without sections: Next, End of the form, implicit."""
    return page_html(
        question_html(1, "Name", destination="Next"),
        question_html(2, "Age", destination="End of the form"),
        question_html(3, "Comments"),
    )


@pytest.fixture
def sectioned_form_html() -> str:
    """Two sections; question 1 branches to the next question or section 2."""
    return page_html(
        section_html(
            "Intro",
            question_html(
                1,
                "Do you drive?",
                choices=[("Yes", "Next"), ("No", "2. Transit")],
            ),
            question_html(2, "Car make"),
        ),
        section_html("Transit", question_html(3, "Which line?")),
    )
