"""Branch-shape classification and choice destination lookup.

The editor draws the same question differently depending on whether it is
open for editing. A collapsed question is a ``role="button"`` element whose
choices have no semantic marker on their destination, only layout; an open
question marks every destination (its own or its choices') with
``.dropdown-placeholder-text``. Rating questions also expose a radiogroup but
carry no branch labels under it.
"""

from __future__ import annotations

from typing import Callable

from bs4.element import Tag

from forms2mermaid.html_utils import nth_descendant
from forms2mermaid.schemas import BranchShape

BRANCH_GROUP_SELECTOR = "div[role='radiogroup']"
CHOICE_SELECTOR = "div[role='radio']"
BRANCH_LABEL_SELECTOR = "span.text-format-content"
FIRST_BRANCH_LABEL_SELECTOR = f"{CHOICE_SELECTOR} {BRANCH_LABEL_SELECTOR}"
DESTINATION_SELECTOR = ".dropdown-placeholder-text"
EDITED_CHOICE_DESTINATION_SELECTOR = "span.dropdown-placeholder-text"

# Element-child indexes leading from a collapsed choice to its destination:
# <div/><div><div><div/><div>DESTINATION</div></div></div>
COLLAPSED_DESTINATION_PATH = (1, 0, 1)


def classify_branch_shape(
    *,
    has_branch_group: bool,
    has_first_branch_label: bool,
    is_being_edited: bool,
    has_single_destination: bool,
) -> BranchShape:
    """Decide whether a question branches per choice.

    A question is multi-branch only inside a branch group, and then either
    when labelled branches exist without a question-level destination, or
    when it is open for editing and a destination marker is present (that
    marker then belongs to one of the choices).
    """
    multi = has_branch_group and (
        (has_first_branch_label and not has_single_destination)
        or (is_being_edited and has_single_destination)
    )
    if multi:
        return BranchShape.MULTI_BRANCH_EDITED if is_being_edited else BranchShape.MULTI_BRANCH_ELEMENT
    return BranchShape.SINGLE_BRANCH_EDITED if is_being_edited else BranchShape.SINGLE_BRANCH_ELEMENT


def edited_choice_destination(choice: Tag) -> Tag | None:
    """Destination of a choice on the question open for editing."""
    return choice.select_one(EDITED_CHOICE_DESTINATION_SELECTOR)


def collapsed_choice_destination(choice: Tag) -> Tag | None:
    """Destination of a choice on a collapsed question, found by position."""
    return nth_descendant(choice, *COLLAPSED_DESTINATION_PATH)


_CHOICE_DESTINATION_STRATEGIES: dict[bool, Callable[[Tag], Tag | None]] = {
    True: edited_choice_destination,
    False: collapsed_choice_destination,
}


def find_choice_destination(choice: Tag, *, is_being_edited: bool) -> Tag | None:
    return _CHOICE_DESTINATION_STRATEGIES[is_being_edited](choice)
