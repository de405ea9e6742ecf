"""Serialize a parsed form into Mermaid flowchart text."""

from __future__ import annotations

from forms2mermaid.labels import sanitize_label
from forms2mermaid.resolver import END_NODE, resolve_destination
from forms2mermaid.schemas import DiagramResult, Form, Question, Section

__all__ = [
    "compose_diagram",
    "compose_front_matter",
    "sanitize_label",
    "serialize_form",
]

_HEADER = ("graph TD", "Start([Start])", f"{END_NODE}([End])")


def serialize_form(form: Form) -> str:
    """Render ``form`` as a ``graph TD`` flowchart.

    Sections become subroutine nodes linked to their first question; every
    question is declared once and followed by its outgoing edges. The output
    depends only on ``form``, so equal forms give identical text.
    """
    lines = list(_HEADER)

    if form.has_sections:
        lines.append(f"Start --> {form.sections[0].node_id}")
        for section in form.sections:
            lines.extend(_render_section(section))
            for question in section.questions:
                lines.extend(_render_question(question, form))
    else:
        first = form.loose_questions[0].node_id if form.loose_questions else END_NODE
        lines.append(f"Start --> {first}")
        for question in form.loose_questions:
            lines.extend(_render_question(question, form))

    return "\n".join(lines) + "\n"


def _render_section(section: Section) -> list[str]:
    title = section.title or section.node_id
    lines = [f"{section.node_id}[[{title}]]"]
    if section.first_question_id:
        lines.append(f"{section.node_id} --> {section.first_question_id}")
    return lines


def _render_question(question: Question, form: Form) -> list[str]:
    lines = [f"{question.node_id}[{question.title}]"]
    if question.has_multiple_branches:
        for choice in question.choices:
            target = resolve_destination(choice.destination, question, form)
            if choice.label:
                lines.append(f"{question.node_id} -->|{choice.label}| {target}")
            else:
                lines.append(f"{question.node_id} --> {target}")
    else:
        target = resolve_destination(question.single_destination, question, form)
        lines.append(f"{question.node_id} --> {target}")
    return lines


def compose_front_matter(
    primary_color: str | None = None,
    *,
    theme: str = "base",
    secondary_color: str | None = None,
    border_color: str | None = None,
    curve: str = "basis",
) -> str:
    """Build a Mermaid front-matter config block.

    Colors are double-quoted: an unquoted ``#`` would start a YAML comment.
    """
    lines = ["---", "config:", f"  theme: {theme}"]
    variables = {
        "primaryColor": primary_color,
        "secondaryColor": secondary_color,
        "primaryBorderColor": border_color,
    }
    present = {name: value for name, value in variables.items() if value}
    if present:
        lines.append("  themeVariables:")
        for name, value in present.items():
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            lines.append(f'    {name}: "{escaped}"')
    lines.extend(["  flowchart:", f"    curve: {curve}", "---"])
    return "\n".join(lines) + "\n"


def compose_diagram(
    result: DiagramResult,
    *,
    theme: str = "base",
    secondary_color: str | None = None,
    border_color: str | None = None,
    curve: str = "basis",
) -> str:
    """Prefix a successful result's diagram with a front-matter block.

    Raises:
        ValueError: If ``result`` is an error result.
    """
    if not result.ok:
        raise ValueError(f"Cannot compose a diagram from an error result: {result.error}")
    front_matter = compose_front_matter(
        result.theme_primary_color,
        theme=theme,
        secondary_color=secondary_color,
        border_color=border_color,
        curve=curve,
    )
    return front_matter + result.diagram_text
