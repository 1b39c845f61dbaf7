"""Local configuration for mdbook-readme."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_RENDERER_NAME = "readme"
DEFAULT_OUTPUT_FILENAME = "README.md"
DEFAULT_ROOT = "."
DEFAULT_SUPPORTED_VERSION = "0.4.40"
DEFAULT_LOG_LEVEL = "WARNING"

# mdbook release whose render context layout this backend understands.
MDBOOK_README_SUPPORTED_VERSION = os.getenv("MDBOOK_README_SUPPORTED_VERSION", DEFAULT_SUPPORTED_VERSION)
MDBOOK_README_LOG_LEVEL = os.getenv("MDBOOK_README_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def get_renderer_config(config: Mapping[str, Any], name: str = DEFAULT_RENDERER_NAME) -> Mapping[str, Any] | None:
    """Return the ``[output.<name>]`` table of a parsed ``book.toml``, if any."""
    output = config.get("output")
    if not isinstance(output, Mapping):
        return None
    table = output.get(name)
    if not isinstance(table, Mapping):
        return None
    return table


def resolve_root(config: Mapping[str, Any], *, renderer: str = DEFAULT_RENDERER_NAME) -> str:
    """Resolve the link root for numbered chapters.

    Args:
        config: The book configuration from the render context.
        renderer: Name of the renderer table to read ``root`` from.

    Returns:
        The configured ``root`` string, or ``"."`` when the table or key is
        missing or the value is not a string.
    """
    table = get_renderer_config(config, renderer)
    if table is None:
        return DEFAULT_ROOT
    root = table.get("root")
    if not isinstance(root, str):
        if root is not None:
            logger.debug("Ignoring non-string root for output.%s: %r", renderer, root)
        return DEFAULT_ROOT
    return root
