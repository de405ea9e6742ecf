"""Tests for the extraction entry point."""

from __future__ import annotations

from builders import page_html, question_html, section_html, soup_of
from forms2mermaid.extraction import (
    HEADING_MISMATCH_MESSAGE,
    HEADING_MISSING_MESSAGE,
    extract_branching,
)
from forms2mermaid.schemas import ResultStatus


class TestPreconditions:
    """Tests for the Branching options screen checks."""

    def test_missing_heading(self) -> None:
        """No heading span gives the first diagnostic."""
        result = extract_branching(page_html(question_html(1, "A"), heading=None))

        assert result.status is ResultStatus.ERROR
        assert result.error == HEADING_MISSING_MESSAGE
        assert result.diagram_text == ""
        assert result.diagram_title == ""

    def test_wrong_heading(self) -> None:
        """A different screen gives the second diagnostic."""
        result = extract_branching(page_html(question_html(1, "A"), heading="Questions"))

        assert result.status is ResultStatus.ERROR
        assert result.error == HEADING_MISMATCH_MESSAGE


class TestExtractBranching:
    """Tests for extract_branching function."""

    def test_success(self, flat_form_html: str) -> None:
        """A valid screen yields the title, diagram and theme color."""
        result = extract_branching(flat_form_html)

        assert result.ok
        assert result.error == ""
        assert result.diagram_title == "Customer survey"
        assert result.diagram_text.startswith("graph TD\n")
        assert result.theme_primary_color == "#0f6cbd"

    def test_accepts_prepared_soup(self, sectioned_form_html: str) -> None:
        """A BeautifulSoup document is used as-is."""
        result = extract_branching(soup_of(sectioned_form_html))

        assert result.ok
        assert "Start --> Section1\n" in result.diagram_text

    def test_missing_theme_color(self) -> None:
        """Pages without the style property have no theme color."""
        result = extract_branching(page_html(question_html(1, "A"), style=None))

        assert result.ok
        assert result.theme_primary_color is None
        assert "themePrimaryColor" not in result.to_record()

    def test_structural_failure(self) -> None:
        """A question without a numbered label yields an error and no diagram."""
        html = page_html(question_html(1, "A"), question_html(None, "B", aria_label="B Required"))

        result = extract_branching(html)

        assert result.status is ResultStatus.ERROR
        assert result.error.startswith("Form structure not recognised:")
        assert result.diagram_text == ""

    def test_resolution_failure(self) -> None:
        """A stale destination is reported distinctly from structural failures."""
        html = page_html(question_html(1, "A", destination="7. Removed"))

        result = extract_branching(html)

        assert result.status is ResultStatus.ERROR
        assert result.error.startswith("Unresolved branch destination:")
        assert result.diagram_text == ""

    def test_rich_text_section_destination(self) -> None:
        """A formatted section title in a dropdown still matches the section."""
        html = page_html(
            section_html("Billing", question_html(1, "Card number"), destination="SECTION_GOTO"),
            section_html("Shipping", question_html(2, "Address")),
        ).replace("SECTION_GOTO", "1. Bill<b>ing</b>")

        result = extract_branching(html)

        assert result.ok
        assert "1 --> Section1\n" in result.diagram_text

    def test_empty_form_is_success(self) -> None:
        """A screen without questions still renders Start and End."""
        result = extract_branching(page_html())

        assert result.ok
        assert result.diagram_text.endswith("Start --> End\n")

    def test_record_uses_camel_case(self, flat_form_html: str) -> None:
        """The host record keeps the transport's field names."""
        record = extract_branching(flat_form_html).to_record()

        assert record["status"] == "Success"
        assert set(record) == {
            "status",
            "error",
            "diagramTitle",
            "diagramText",
            "themePrimaryColor",
        }
