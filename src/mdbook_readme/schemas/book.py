"""Book tree models mirroring the mdbook render context."""

from __future__ import annotations

from typing import Annotated, Any, Iterable, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


def _untag_item(raw: Any) -> Any:
    """Convert mdbook's externally tagged item encoding into a ``kind`` mapping."""
    if raw == "Separator":
        return {"kind": "separator"}
    if isinstance(raw, dict) and len(raw) == 1:
        ((tag, payload),) = raw.items()
        if tag == "Chapter" and isinstance(payload, dict):
            return {"kind": "chapter", **payload}
        if tag == "PartTitle":
            return {"kind": "part_title", "title": payload}
    return raw


def _untag_items(value: Any) -> Any:
    if isinstance(value, list):
        return [_untag_item(item) for item in value]
    return value


class Chapter(BaseModel):
    """A chapter of the book.

    Attributes:
        name: Display name used as the link text.
        content: Rendered Markdown body, emitted for unnumbered chapters.
        number: Hierarchical section number, e.g. ``[2, 1]`` for 2.1.
        sub_items: Nested items, visited right after this chapter.
        path: Location of the rendered chapter. ``None`` marks a draft.
        source_path: Content source path relative to the book source dir.
        parent_names: Names of the enclosing chapters.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["chapter"] = "chapter"
    name: str
    content: str = ""
    number: list[PositiveInt] | None = None
    sub_items: list[BookItem] = Field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = Field(default_factory=list)

    @field_validator("sub_items", mode="before")
    @classmethod
    def untag_sub_items(cls, value: Any) -> Any:
        return _untag_items(value)

    @property
    def is_draft(self) -> bool:
        """A chapter without a rendered path is a placeholder."""
        return self.path is None


class Separator(BaseModel):
    """Horizontal rule between chapter runs."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["separator"] = "separator"


class PartTitle(BaseModel):
    """Heading that starts a new part of the book."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["part_title"] = "part_title"
    title: str


BookItem = Annotated[Union[Chapter, Separator, PartTitle], Field(discriminator="kind")]

Chapter.model_rebuild()


class Book(BaseModel):
    """Top-level book structure."""

    model_config = ConfigDict(frozen=True)

    sections: list[BookItem] = Field(default_factory=list)

    @field_validator("sections", mode="before")
    @classmethod
    def untag_sections(cls, value: Any) -> Any:
        return _untag_items(value)

    def iter_items(self) -> Iterator[BookItem]:
        """Iterate over every item depth-first, parents before children."""
        return iter_items(self.sections)


def iter_items(items: Iterable[BookItem]) -> Iterator[BookItem]:
    """Yield items in document order, descending into chapter ``sub_items``."""
    for item in items:
        yield item
        if isinstance(item, Chapter):
            yield from iter_items(item.sub_items)
