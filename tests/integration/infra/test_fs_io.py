from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.
"""

from pathlib import Path

from inlining_log.infra.fs import save_lines


def test_save_lines_creates_parent_dirs(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "report.txt"

    ok, error = save_lines(str(target), ["first", "second"])

    assert ok is True
    assert error is None
    assert target.read_text(encoding="utf-8") == "first\nsecond\n"


def test_save_lines_reports_os_errors(tmp_path: Path) -> None:
    ok, error = save_lines(str(tmp_path), ["line"])

    assert ok is False
    assert error
