"""Custom exceptions for forms2mermaid."""


class Forms2mermaidError(Exception):
    """Base exception for forms2mermaid operations."""


class ScreenNotFoundError(Forms2mermaidError):
    """The document is not the Branching options editor screen."""


class ParseError(Forms2mermaidError):
    """The editor markup diverged from the supported structure."""


class ResolutionError(Forms2mermaidError):
    """A branch destination does not name any section or question."""
