"""Shared schemas for mdbook-readme."""

from mdbook_readme.schemas.book import Book, BookItem, Chapter, PartTitle, Separator, iter_items
from mdbook_readme.schemas.context import RenderContext, RenderResult

__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "PartTitle",
    "RenderContext",
    "RenderResult",
    "Separator",
    "iter_items",
]
