"""Resolve destination text into canonical flowchart node ids.

Destinations come from the editor's "go to" dropdowns as display strings:
``"Next"``, ``"End of the form"``, a section title such as ``"2. Contact"``,
or a question title such as ``"5. Where do you live?"``. They resolve to
``"<number>"``, ``"Section<number>"`` or ``"End"``.
"""

from __future__ import annotations

import logging

from forms2mermaid.exceptions import ResolutionError
from forms2mermaid.labels import sanitize_label, split_question_label
from forms2mermaid.schemas import Form, Question, Section

logger = logging.getLogger(__name__)

NEXT_KEYWORD = "Next"
END_KEYWORD = "End of the form"
END_NODE = "End"


def resolve_destination(raw: str, question: Question, form: Form) -> str:
    """Return the node id that ``question`` branches to for ``raw``.

    Raises:
        ResolutionError: If ``raw`` names no section and no existing question.
    """
    if not raw or raw == NEXT_KEYWORD:
        target = _resolve_implicit_next(question, form)
    elif raw == END_KEYWORD:
        target = END_NODE
    else:
        target = _resolve_title_reference(raw, form)
    logger.debug("Question %d: %r -> %s", question.number, raw, target)
    return target


def resolve_section_exit(section: Section, form: Form) -> str:
    """Return where control goes after the last question of ``section``."""
    raw = section.destination
    if not raw or raw == NEXT_KEYWORD:
        following = section.number + 1
        return END_NODE if following > form.section_count else f"Section{following}"
    if raw == END_KEYWORD:
        return END_NODE
    return _resolve_title_reference(raw, form)


def _resolve_implicit_next(question: Question, form: Form) -> str:
    section = form.section_for(question)
    if section is not None and form.is_last_in_section(question):
        return resolve_section_exit(section, form)
    following = question.number + 1
    return END_NODE if following > form.question_count else str(following)


def _resolve_title_reference(raw: str, form: Form) -> str:
    wanted = sanitize_label(raw)
    for section in form.sections:
        if sanitize_label(section.matching_title) == wanted:
            return section.node_id

    parsed = split_question_label(raw)
    if parsed is None:
        raise ResolutionError(f"{raw!r} matches no section or question")
    number, _ = parsed
    if not 1 <= number <= form.question_count:
        raise ResolutionError(
            f"{raw!r} refers to question {number}, but the form has {form.question_count}"
        )
    return str(number)
