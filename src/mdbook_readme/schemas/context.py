"""Render context and render result models."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from mdbook_readme.schemas.book import Book


class RenderContext(BaseModel):
    """Input mdbook hands to an alternative backend on stdin.

    Attributes:
        version: mdbook version that produced the context.
        root: Root directory of the book.
        book: The parsed book tree.
        config: The book configuration (``book.toml``) as a mapping.
        destination: Directory this backend should write into.
    """

    version: str
    root: Path
    book: Book
    config: dict[str, Any] = Field(default_factory=dict)
    destination: Path


class RenderResult(BaseModel):
    """Final render output."""

    lines: list[str]
    output_path: Path | None = None
    summary: str
