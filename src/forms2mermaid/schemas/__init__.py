"""Shared schemas for forms2mermaid."""

from forms2mermaid.schemas.form import (
    SECTION_TITLE_PLACEHOLDER,
    BranchShape,
    Choice,
    Form,
    Question,
    Section,
)
from forms2mermaid.schemas.result import DiagramResult, ResultStatus

__all__ = [
    "SECTION_TITLE_PLACEHOLDER",
    "BranchShape",
    "Choice",
    "DiagramResult",
    "Form",
    "Question",
    "ResultStatus",
    "Section",
]
