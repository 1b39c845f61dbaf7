"""End-to-end tests for the mdbook-readme command."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest

from mdbook_readme.cli import main, read_input
from mdbook_readme.exceptions import RenderContextError


def _stdin(data: str | bytes) -> io.TextIOWrapper:
    """Text stdin backed by a byte buffer, as the real one is."""
    raw = data.encode("utf-8") if isinstance(data, str) else data
    return io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8")


def test_reads_context_from_stdin(
    monkeypatch: pytest.MonkeyPatch, render_context_json: str, render_context_payload: dict[str, Any]
) -> None:
    monkeypatch.setattr("sys.stdin", _stdin(render_context_json))

    assert main([]) == 0

    readme = Path(render_context_payload["destination"]) / "README.md"
    assert readme.read_text(encoding="utf-8").startswith("# Introduction\n\nWelcome.\n\n# User Guide\n")


def test_reads_context_from_file_and_prints(
    tmp_path: Path, render_context_json: str, capsys: pytest.CaptureFixture[str]
) -> None:
    context_file = tmp_path / "context.json"
    context_file.write_text(render_context_json, encoding="utf-8")

    assert main(["--input", str(context_file), "--stdout"]) == 0

    out = capsys.readouterr().out
    assert "- [Getting Started](src/ch1.md)\n  - [Installation](src/ch1/install.md)\n---\n" in out
    assert out.endswith("Thanks to everyone.\n\n")


def test_destination_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, render_context_json: str) -> None:
    monkeypatch.setattr("sys.stdin", _stdin(render_context_json))
    target = tmp_path / "custom"

    assert main(["--destination", str(target)]) == 0
    assert (target / "README.md").is_file()


def test_version_mismatch_exits_with_error(
    monkeypatch: pytest.MonkeyPatch, render_context_payload: dict[str, Any]
) -> None:
    render_context_payload["version"] = "0.1.0"
    monkeypatch.setattr("sys.stdin", _stdin(json.dumps(render_context_payload)))

    assert main([]) == 1
    assert not Path(render_context_payload["destination"]).exists()


def test_skip_version_check(monkeypatch: pytest.MonkeyPatch, render_context_payload: dict[str, Any]) -> None:
    render_context_payload["version"] = "0.1.0"
    monkeypatch.setattr("sys.stdin", _stdin(json.dumps(render_context_payload)))

    assert main(["--skip-version-check"]) == 0


def test_missing_input_file(tmp_path: Path) -> None:
    assert main(["--input", str(tmp_path / "missing.json")]) == 1


def test_malformed_context(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", _stdin("{not json"))
    assert main([]) == 1


@pytest.mark.parametrize("level", ["verbose", "7", ""])
def test_rejects_unknown_log_level(level: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", level, "--input", "missing.json"])
    assert excinfo.value.code == 2


def test_log_level_is_case_insensitive(tmp_path: Path, render_context_json: str) -> None:
    context_file = tmp_path / "context.json"
    context_file.write_text(render_context_json, encoding="utf-8")

    assert main(["--log-level", "debug", "--input", str(context_file), "--stdout"]) == 0


def test_non_utf8_input_file(tmp_path: Path) -> None:
    context_file = tmp_path / "context.json"
    context_file.write_bytes(b'{"version": "\xff"}')

    assert main(["--input", str(context_file)]) == 1


def test_non_utf8_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", _stdin(b'{"version": "\xff\xfe"}'))
    assert main([]) == 1


def test_read_input_missing_file_is_render_context_error(tmp_path: Path) -> None:
    with pytest.raises(RenderContextError, match="not found"):
        read_input(str(tmp_path / "missing.json"))


def test_read_input_returns_bytes(tmp_path: Path) -> None:
    context_file = tmp_path / "context.json"
    context_file.write_bytes(b"{}")
    assert read_input(str(context_file)) == b"{}"
