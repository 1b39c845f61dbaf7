"""Module entry point for running with python -m mdbook_readme."""

from mdbook_readme.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
