"""mdbook-readme: render an mdbook book into a single README.md."""

from mdbook_readme.exceptions import (
    ContractViolationError,
    MdbookReadmeError,
    RenderContextError,
    VersionError,
    VersionMismatchError,
    VersionParseError,
    WriteError,
)
from mdbook_readme.formatter import Classification, classify_chapter, format_items, step
from mdbook_readme.renderer import load_render_context, render_book
from mdbook_readme.schemas import Book, BookItem, Chapter, PartTitle, RenderContext, RenderResult, Separator

__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "Classification",
    "ContractViolationError",
    "MdbookReadmeError",
    "PartTitle",
    "RenderContext",
    "RenderContextError",
    "RenderResult",
    "Separator",
    "VersionError",
    "VersionMismatchError",
    "VersionParseError",
    "WriteError",
    "classify_chapter",
    "format_items",
    "load_render_context",
    "render_book",
    "step",
]
