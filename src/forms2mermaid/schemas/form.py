"""Form structure models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Label Microsoft Forms shows for a section whose title was never edited.
SECTION_TITLE_PLACEHOLDER = "Section title"


class BranchShape(str, Enum):
    """How a question's outgoing branches are laid out in the editor.

    ``ELEMENT`` shapes are questions rendered collapsed (as a button);
    ``EDITED`` shapes are the question currently open for editing.
    """

    SINGLE_BRANCH_ELEMENT = "single_branch_element"
    SINGLE_BRANCH_EDITED = "single_branch_edited"
    MULTI_BRANCH_ELEMENT = "multi_branch_element"
    MULTI_BRANCH_EDITED = "multi_branch_edited"

    @property
    def is_multi_branch(self) -> bool:
        return self in (BranchShape.MULTI_BRANCH_ELEMENT, BranchShape.MULTI_BRANCH_EDITED)


class Choice(BaseModel):
    """One labelled branch of a multi-branch question."""

    model_config = ConfigDict(frozen=True)

    label: str
    destination: str = ""


class Question(BaseModel):
    """A numbered question and its outgoing branches.

    Attributes:
        number: Identity taken from the leading ``N.`` of the label.
        title: Sanitized display title, prefixed with ``"N. "``.
        is_being_edited: False when the editor renders the question as a button.
        shape: Branch layout classification.
        single_destination: Raw destination text for single-branch questions,
            empty when the question falls through to the next one.
        choices: Branches of a multi-branch question, in document order.
        section_number: Ordinal of the owning section, if the form has sections.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1)
    title: str
    is_being_edited: bool = False
    shape: BranchShape = BranchShape.SINGLE_BRANCH_ELEMENT
    single_destination: str = ""
    choices: tuple[Choice, ...] = ()
    section_number: int | None = None

    @property
    def node_id(self) -> str:
        return str(self.number)

    @property
    def has_multiple_branches(self) -> bool:
        return self.shape.is_multi_branch


class Section(BaseModel):
    """A form section and the questions it owns."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1)
    label: str = ""
    title: str = ""
    questions: tuple[Question, ...] = ()
    destination: str = "Next"

    @property
    def node_id(self) -> str:
        return f"Section{self.number}"

    @property
    def matching_title(self) -> str:
        """Title as destination dropdowns spell it, e.g. ``"2. Contact"``."""
        label = "" if self.label == SECTION_TITLE_PLACEHOLDER else self.label
        return f"{self.number}. {label}".rstrip()

    @property
    def first_question_id(self) -> str:
        return self.questions[0].node_id if self.questions else ""

    @property
    def last_question_id(self) -> str:
        return self.questions[-1].node_id if self.questions else ""


class Form(BaseModel):
    """Parsed branching structure of a whole form.

    A form either has sections, each owning its questions, or a flat list of
    questions (``loose_questions``). Question numbers run across the whole
    form regardless of section boundaries.
    """

    model_config = ConfigDict(frozen=True)

    sections: tuple[Section, ...] = ()
    loose_questions: tuple[Question, ...] = ()

    @property
    def has_sections(self) -> bool:
        return bool(self.sections)

    @property
    def questions(self) -> list[Question]:
        if not self.sections:
            return list(self.loose_questions)
        return [question for section in self.sections for question in section.questions]

    @property
    def question_count(self) -> int:
        if not self.sections:
            return len(self.loose_questions)
        return sum(len(section.questions) for section in self.sections)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    def section_for(self, question: Question) -> Section | None:
        if question.section_number is None:
            return None
        index = question.section_number - 1
        if 0 <= index < len(self.sections):
            return self.sections[index]
        return None

    def is_last_in_section(self, question: Question) -> bool:
        section = self.section_for(question)
        return section is not None and section.last_question_id == question.node_id
