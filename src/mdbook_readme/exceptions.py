"""Custom exceptions for mdbook-readme."""


class MdbookReadmeError(Exception):
    """Base exception for mdbook-readme operations."""


class RenderContextError(MdbookReadmeError):
    """Render context could not be parsed."""


class ContractViolationError(MdbookReadmeError):
    """A book item breaks an invariant of the document tree."""


class VersionError(MdbookReadmeError):
    """Error during mdbook version handling."""


class VersionParseError(VersionError):
    """Version string is not a valid semantic version."""


class VersionMismatchError(VersionError):
    """Render context was produced by an unsupported mdbook version."""


class WriteError(MdbookReadmeError):
    """Output could not be written."""
