"""Parse the Branching options editor into sections, questions and choices."""

from __future__ import annotations

import logging

from bs4.element import Tag

from forms2mermaid.branching import (
    BRANCH_GROUP_SELECTOR,
    BRANCH_LABEL_SELECTOR,
    CHOICE_SELECTOR,
    DESTINATION_SELECTOR,
    FIRST_BRANCH_LABEL_SELECTOR,
    classify_branch_shape,
    find_choice_destination,
)
from forms2mermaid.exceptions import ParseError
from forms2mermaid.html_utils import closest_with_attribute, element_text
from forms2mermaid.labels import sanitize_label, split_question_label
from forms2mermaid.schemas import Choice, Form, Question, Section

logger = logging.getLogger(__name__)

QUESTION_SELECTOR = ".office-form-question"
QUESTION_TITLE_SELECTOR = "div[data-automation-id='questionTitle'] span.text-format-content"
SECTION_MARKER_SELECTOR = "[data-automation-id='SectionTitle']"
NO_TITLE_PLACEHOLDER = "NO TITLE"
NEXT_KEYWORD = "Next"


def parse_form(root: Tag) -> Form:
    """Build the form from every section marker, or every question if none."""
    markers = root.select(SECTION_MARKER_SELECTOR)
    if markers:
        sections = tuple(
            parse_section(marker, number=position + 1)
            for position, marker in enumerate(markers)
        )
        form = Form(sections=sections)
        logger.debug(
            "Parsed %d sections with %d questions", form.section_count, form.question_count
        )
    else:
        questions = tuple(parse_question(element) for element in root.select(QUESTION_SELECTOR))
        form = Form(loose_questions=questions)
        logger.debug("Parsed %d questions without sections", form.question_count)

    _check_numbering(form)
    return form


def parse_section(marker: Tag, *, number: int) -> Section:
    """Build a section from its ``SectionTitle`` marker.

    The marker sits inside an element whose ``aria-label`` holds the section
    title; that element's grandparent contains the section's questions and
    its own "go to" dropdown.
    """
    labelled = closest_with_attribute(marker, "aria-label")
    if labelled is None:
        raise ParseError(f"Section {number} has no aria-label")
    label = labelled["aria-label"]

    container = labelled.parent.parent if labelled.parent and labelled.parent.parent else labelled
    questions = tuple(
        parse_question(element, section_number=number)
        for element in container.select(QUESTION_SELECTOR)
    )

    destination_tag = _section_destination(container)
    destination = element_text(destination_tag) if destination_tag is not None else NEXT_KEYWORD

    logger.debug("Section %d %r: %d questions, goes to %r", number, label, len(questions), destination)
    return Section(
        number=number,
        label=label,
        title=sanitize_label(label),
        questions=questions,
        destination=destination or NEXT_KEYWORD,
    )


def parse_question(element: Tag, *, section_number: int | None = None) -> Question:
    """Build a question from one ``.office-form-question`` element.

    Raises:
        ParseError: If the element's ``aria-label`` does not start with ``N.``.
    """
    aria_label = element.get("aria-label") or ""
    parsed = split_question_label(aria_label)
    if parsed is None or parsed[0] < 1:
        raise ParseError(f"Question label {aria_label!r} does not start with a number")
    number = parsed[0]

    title_tag = element.select_one(QUESTION_TITLE_SELECTOR)
    raw_title = element_text(title_tag) if title_tag is not None else NO_TITLE_PLACEHOLDER
    title = f"{number}. {sanitize_label(raw_title)}"

    is_being_edited = element.get("role") != "button"
    branch_group = element.select_one(BRANCH_GROUP_SELECTOR)
    first_branch_label = (
        branch_group.select_one(FIRST_BRANCH_LABEL_SELECTOR) if branch_group is not None else None
    )
    goto_tag = element.select_one(DESTINATION_SELECTOR)

    shape = classify_branch_shape(
        has_branch_group=branch_group is not None,
        has_first_branch_label=first_branch_label is not None,
        is_being_edited=is_being_edited,
        has_single_destination=goto_tag is not None,
    )

    choices: tuple[Choice, ...] = ()
    single_destination = ""
    if shape.is_multi_branch:
        choices = tuple(
            parse_choice(choice, is_being_edited=is_being_edited)
            for choice in branch_group.select(CHOICE_SELECTOR)
        )
    elif goto_tag is not None:
        single_destination = element_text(goto_tag)

    return Question(
        number=number,
        title=title,
        is_being_edited=is_being_edited,
        shape=shape,
        single_destination=single_destination,
        choices=choices,
        section_number=section_number,
    )


def parse_choice(element: Tag, *, is_being_edited: bool) -> Choice:
    """Build one branch of a multi-branch question.

    Raises:
        ParseError: If the choice has no label span.
    """
    label_tag = element.select_one(BRANCH_LABEL_SELECTOR)
    if label_tag is None:
        raise ParseError("Branch choice has no label")
    destination_tag = find_choice_destination(element, is_being_edited=is_being_edited)
    return Choice(
        label=sanitize_label(element_text(label_tag)),
        destination=element_text(destination_tag),
    )


def _section_destination(container: Tag) -> Tag | None:
    for candidate in container.select(DESTINATION_SELECTOR):
        if candidate.find_parent(class_="office-form-question") is None:
            return candidate
    return None


def _check_numbering(form: Form) -> None:
    numbers = [question.number for question in form.questions]
    if numbers != list(range(1, len(numbers) + 1)):
        logger.warning("Question numbers are not contiguous from 1: %s", numbers)
