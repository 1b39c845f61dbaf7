"""mdbook version compatibility check."""

from __future__ import annotations

import re
from typing import NamedTuple

from mdbook_readme.config import MDBOOK_README_SUPPORTED_VERSION
from mdbook_readme.exceptions import VersionMismatchError, VersionParseError

_SEMVER_RE = re.compile(
    r"^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<pre>[0-9A-Za-z.\-]+))?(?:\+(?P<build>[0-9A-Za-z.\-]+))?$"
)


class Version(NamedTuple):
    """Semantic version without build metadata."""

    major: int
    minor: int
    patch: int
    pre: str | None = None

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        return f"{text}-{self.pre}" if self.pre else text


def parse_version(text: str) -> Version:
    """Parse ``MAJOR.MINOR.PATCH[-pre][+build]``, dropping build metadata."""
    match = _SEMVER_RE.match(text.strip())
    if not match:
        raise VersionParseError(f"Failed to parse version {text!r}")
    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        pre=match.group("pre"),
    )


def check_version(book_version: str, supported: str = MDBOOK_README_SUPPORTED_VERSION) -> Version:
    """Ensure the render context comes from the supported mdbook version.

    Args:
        book_version: Version reported in the render context.
        supported: Version this backend was built against.

    Returns:
        The parsed book version.

    Raises:
        VersionParseError: If either version is malformed.
        VersionMismatchError: If the versions differ.
    """
    built = parse_version(supported)
    book = parse_version(book_version)
    if built != book:
        raise VersionMismatchError(f"backend built on v{built}, but mdbook on v{book}")
    return book
