"""Shared HTML utilities for reading the Forms editor markup."""

from __future__ import annotations

import re

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

_BLOCK_TAGS = frozenset(
    {"address", "article", "blockquote", "br", "dd", "div", "dl", "dt", "h1", "h2", "h3",
     "h4", "h5", "h6", "hr", "li", "ol", "p", "pre", "section", "table", "td", "th", "tr", "ul"}
)


def normalize_text(text: str) -> str:
    """Collapse whitespace runs and trim, approximating ``innerText``."""
    return re.sub(r"\s+", " ", text).strip()


def element_text(tag: Tag | None) -> str:
    """Return the visible text of ``tag``, or an empty string for ``None``.

    Inline markup such as ``<strong>`` joins its text with the neighbouring
    text; block elements and ``<br>`` separate with a space.
    """
    if tag is None:
        return ""
    return normalize_text(_inner_text(tag))


def _inner_text(tag: Tag) -> str:
    parts: list[str] = []
    for child in tag.children:
        if isinstance(child, Tag):
            text = _inner_text(child)
            parts.append(f" {text} " if child.name in _BLOCK_TAGS else text)
        elif type(child) is NavigableString:
            parts.append(str(child))
    return "".join(parts)


def element_children(tag: Tag) -> list[Tag]:
    """Return the element children of ``tag``, skipping text nodes."""
    return [child for child in tag.children if isinstance(child, Tag)]


def nth_descendant(tag: Tag | None, *path: int) -> Tag | None:
    """Follow a chain of element-child indexes, returning ``None`` on a miss."""
    current = tag
    for index in path:
        if current is None:
            return None
        children = element_children(current)
        if index >= len(children):
            return None
        current = children[index]
    return current


def closest_with_attribute(tag: Tag, attribute: str) -> Tag | None:
    """Return ``tag`` or its nearest ancestor carrying ``attribute``."""
    if tag.has_attr(attribute):
        return tag
    return tag.find_parent(attrs={attribute: True})


def document_title(soup: BeautifulSoup) -> str:
    if soup.title:
        return soup.title.get_text(" ", strip=True)
    return ""


def inline_style_property(soup: BeautifulSoup, name: str) -> str | None:
    """Read a CSS custom property from the first inline style declaring it.

    Only ``style`` attributes are inspected; stylesheets are not evaluated.
    """
    pattern = re.compile(rf"(?:^|;)\s*{re.escape(name)}\s*:\s*([^;]+)")
    for tag in soup.find_all(style=True):
        match = pattern.search(tag["style"])
        if match:
            value = match.group(1).strip()
            if value:
                return value
    return None
