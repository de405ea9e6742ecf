"""Module entry point for running with python -m forms2mermaid."""

import sys

from forms2mermaid.cli import main

if __name__ == "__main__":
    sys.exit(main())
