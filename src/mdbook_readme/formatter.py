"""Format a book tree into a flat Markdown table of contents."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, NamedTuple

from mdbook_readme.config import DEFAULT_ROOT
from mdbook_readme.exceptions import ContractViolationError
from mdbook_readme.schemas import BookItem, Chapter, PartTitle, Separator


class Classification(str, Enum):
    """Role of a chapter within the flat output."""

    PREFIX = "prefix"
    NUMBERED = "numbered"
    SUFFIX = "suffix"
    DRAFT = "draft"


INITIAL_CLASSIFICATION = Classification.PREFIX


class Step(NamedTuple):
    """Result of formatting one item."""

    item: BookItem
    classification: Classification
    lines: list[str]


def classify_chapter(chapter: Chapter, previous: Classification) -> Classification:
    """Classify a chapter from its own shape and the previous classification.

    An unnumbered chapter right after a numbered one is a suffix chapter,
    otherwise it is a prefix chapter. A chapter without a path is a draft
    regardless of its number.
    """
    if chapter.number is None:
        if previous is Classification.NUMBERED:
            current = Classification.SUFFIX
        else:
            current = Classification.PREFIX
    else:
        current = Classification.NUMBERED

    if chapter.is_draft:
        return Classification.DRAFT
    return current


def build_link_target(root: str, source_path: str) -> str:
    """Join the link root and a chapter source path for display.

    Mirrors path joining rather than normalizing, so ``"."`` and ``"ch1.md"``
    give ``"./ch1.md"``. An absolute source path replaces the root.
    """
    if not root or source_path.startswith("/"):
        return source_path
    if root.endswith("/"):
        return root + source_path
    return f"{root}/{source_path}"


def step(item: BookItem, previous: Classification, root: str = DEFAULT_ROOT) -> tuple[Classification, list[str]]:
    """Format a single item.

    Args:
        item: The book item to format.
        previous: Classification carried from the preceding chapters.
        root: Link root for numbered chapters.

    Returns:
        Tuple of (classification to carry forward, emitted lines). Separators
        and part titles carry ``previous`` forward unchanged.

    Raises:
        ContractViolationError: If a numbered chapter has no section number
            or no source path.
    """
    if isinstance(item, Chapter):
        current = classify_chapter(item, previous)
        lines: list[str] = []
        # Blank line closes the numbered list
        if previous is Classification.NUMBERED and current is Classification.SUFFIX:
            lines.append("")
        lines.extend(_render_chapter(item, current, root))
        return current, lines

    lines = [""] if previous is Classification.NUMBERED else []
    if isinstance(item, Separator):
        lines.extend(["---", ""])
    elif isinstance(item, PartTitle):
        lines.extend([f"# {item.title}", ""])
    else:
        raise TypeError(f"Unsupported book item: {type(item).__name__}")
    return previous, lines


def iter_steps(items: Iterable[BookItem], root: str = DEFAULT_ROOT) -> Iterator[Step]:
    """Fold over ``items`` left to right, yielding each formatted step."""
    previous = INITIAL_CLASSIFICATION
    for item in items:
        current, lines = step(item, previous, root)
        yield Step(item=item, classification=current, lines=lines)
        previous = current


def iter_lines(items: Iterable[BookItem], root: str = DEFAULT_ROOT) -> Iterator[str]:
    """Lazily yield output lines for ``items``."""
    for result in iter_steps(items, root):
        yield from result.lines


def format_items(items: Iterable[BookItem], root: str = DEFAULT_ROOT) -> list[str]:
    """Format ``items`` into the ordered list of README lines."""
    return list(iter_lines(items, root))


def _render_chapter(chapter: Chapter, classification: Classification, root: str) -> list[str]:
    if classification in (Classification.PREFIX, Classification.SUFFIX):
        return [chapter.content, ""]
    if classification is Classification.NUMBERED:
        return [_render_numbered(chapter, root)]
    return []


def _render_numbered(chapter: Chapter, root: str) -> str:
    if not chapter.number:
        raise ContractViolationError(f"Numbered chapter {chapter.name!r} has no section number")
    if chapter.source_path is None:
        raise ContractViolationError(f"Numbered chapter {chapter.name!r} has no source path")
    indent = " " * ((len(chapter.number) - 1) * 2)
    link = build_link_target(root, chapter.source_path)
    return f"{indent}- [{chapter.name}]({link})"
