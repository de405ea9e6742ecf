"""Tests for HTML text helpers."""

from __future__ import annotations

from builders import element_of
from forms2mermaid.html_utils import element_text, nth_descendant


class TestElementText:
    """Tests for element_text function."""

    def test_inline_markup_joins_text(self) -> None:
        """Rich-text runs read as one string, as the browser shows them."""
        tag = element_of("<span>Hel<strong>lo</strong>, <em>world</em>?</span>")

        assert element_text(tag) == "Hello, world?"

    def test_block_elements_separate_text(self) -> None:
        """Block boundaries and line breaks become single spaces."""
        tag = element_of("<div><div>First</div>Second<br>Third<p>Fourth</p></div>")

        assert element_text(tag) == "First Second Third Fourth"

    def test_comments_are_ignored(self) -> None:
        """HTML comments are not part of the visible text."""
        tag = element_of("<span>Bill<!-- rich text -->ing</span>")

        assert element_text(tag) == "Billing"

    def test_none_is_empty(self) -> None:
        """A missing element reads as empty text."""
        assert element_text(None) == ""


class TestNthDescendant:
    """Tests for nth_descendant function."""

    def test_out_of_range_index(self) -> None:
        """An index past the children returns None."""
        assert nth_descendant(element_of("<div><span></span></div>"), 3) is None
