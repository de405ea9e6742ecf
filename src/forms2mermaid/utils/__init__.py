"""Utility helpers for forms2mermaid."""
