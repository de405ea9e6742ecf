"""forms2mermaid: render Microsoft Forms branching as Mermaid flowcharts."""

from forms2mermaid.exceptions import (
    Forms2mermaidError,
    ParseError,
    ResolutionError,
    ScreenNotFoundError,
)
from forms2mermaid.extraction import extract_branching
from forms2mermaid.form_parser import parse_form
from forms2mermaid.mermaid import compose_diagram, compose_front_matter, serialize_form
from forms2mermaid.resolver import resolve_destination
from forms2mermaid.schemas import (
    BranchShape,
    Choice,
    DiagramResult,
    Form,
    Question,
    ResultStatus,
    Section,
)

__all__ = [
    "BranchShape",
    "Choice",
    "DiagramResult",
    "Form",
    "Forms2mermaidError",
    "ParseError",
    "Question",
    "ResolutionError",
    "ResultStatus",
    "ScreenNotFoundError",
    "Section",
    "compose_diagram",
    "compose_front_matter",
    "extract_branching",
    "parse_form",
    "resolve_destination",
    "serialize_form",
]
