"""Label parsing and sanitization for Mermaid output."""

from __future__ import annotations

import re

# "<number>. <text> <type> <required>", as question labels and
# question-title destinations are spelled.
QUESTION_NUMBER_RE = re.compile(r"^(\d{1,5})\.(.*)$", re.DOTALL)

QUOTE_ENTITY = "#quot;"
# Mermaid cannot show these literally inside node or edge labels.
_UNSAFE_CHARS_RE = re.compile(r"[()/;<>:|\[\]{}]")


def split_question_label(text: str) -> tuple[int, str] | None:
    """Split ``"3. Name"`` into ``(3, " Name")``; ``None`` when unnumbered."""
    match = QUESTION_NUMBER_RE.match(text)
    if not match:
        return None
    return int(match.group(1)), match.group(2)


def sanitize_label(text: str) -> str:
    """Make ``text`` safe to place inside a Mermaid label.

    Unsafe punctuation is stripped and double quotes become ``#quot;``.
    Entities already present are kept intact, so sanitizing twice gives the
    same result as sanitizing once.
    """
    pieces = text.split(QUOTE_ENTITY)
    cleaned = [_UNSAFE_CHARS_RE.sub("", piece).replace('"', QUOTE_ENTITY) for piece in pieces]
    return re.sub(r"\s+", " ", QUOTE_ENTITY.join(cleaned)).strip()
