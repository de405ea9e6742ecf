"""Command line interface: turn a saved editor page into Mermaid text."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import httpx

from forms2mermaid.config import FORMS2MERMAID_FETCH_TIMEOUT_S, FORMS2MERMAID_USER_AGENT
from forms2mermaid.extraction import extract_branching
from forms2mermaid.mermaid import compose_diagram
from forms2mermaid.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="forms2mermaid",
        description="Render the branching of a Microsoft Forms Branching options page as a Mermaid flowchart.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Saved HTML of the Branching options page")
    source.add_argument("--url", help="URL serving a saved Branching options page")
    parser.add_argument("--json", action="store_true", help="Print the full result record as JSON")
    parser.add_argument("--front-matter", action="store_true", help="Prepend a Mermaid config block")
    parser.add_argument("--output", help="Write to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)

    html = load_html(url=args.url, file_path=args.file)
    result = extract_branching(html)

    if args.json:
        text = json.dumps(result.to_record(), indent=2) + "\n"
    elif not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    elif args.front_matter:
        text = compose_diagram(result)
    else:
        text = result.diagram_text

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(text)
    return 0 if result.ok else 1


def load_html(*, url: str | None, file_path: str | None) -> str:
    if url:
        response = httpx.get(
            url,
            follow_redirects=True,
            timeout=FORMS2MERMAID_FETCH_TIMEOUT_S,
            headers={"User-Agent": FORMS2MERMAID_USER_AGENT},
        )
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")
