"""Test setup for mdbook-readme."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _chapter(name: str, number: list[int] | None, path: str | None, content: str = "") -> dict[str, Any]:
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": number,
            "sub_items": [],
            "path": path,
            "source_path": path,
            "parent_names": [],
        }
    }


@pytest.fixture
def render_context_payload(tmp_path: Path) -> dict[str, Any]:
    """Render context as mdbook serializes it for a small book."""
    intro = _chapter("Introduction", None, "intro.md", "# Introduction\n\nWelcome.")
    ch1 = _chapter("Getting Started", [1], "ch1.md")
    ch1["Chapter"]["sub_items"] = [_chapter("Installation", [1, 1], "ch1/install.md")]
    return {
        "version": "0.4.40",
        "root": str(tmp_path),
        "book": {
            "sections": [
                intro,
                {"PartTitle": "User Guide"},
                ch1,
                _chapter("Unwritten", [2], None),
                "Separator",
                _chapter("Contributors", None, "contributors.md", "Thanks to everyone."),
            ],
            "__non_exhaustive": None,
        },
        "config": {
            "book": {"title": "Example", "src": "src"},
            "output": {"readme": {"root": "src"}},
        },
        "destination": str(tmp_path / "book" / "readme"),
    }


@pytest.fixture
def render_context_json(render_context_payload: dict[str, Any]) -> str:
    return json.dumps(render_context_payload)
