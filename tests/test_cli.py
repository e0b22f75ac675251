"""Tests for the doclint CLI: `lint`, `outline` and `toc` commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from doclint import __version__
from doclint.cli import main
from doclint.corpus import STALE_TOC_ERROR

if TYPE_CHECKING:
    from pathlib import Path


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

CLEAN_MD = """\
### class: Foo

#### new Foo(name)
- `name` display name

#### Foo.bar([a], b)
- `a` optional first
- `b` second
- returns: a number

#### event: 'close'
"""

BROKEN_MD = """\
### class: Foo

#### Foo.bar(a)
- Returns: a number
"""

STALE_TOC_MD = """\
# API

<!-- toc -->

<!-- tocstop -->

## class: Foo
"""


def _project(tmp_project: Path, content: str, name: str = "api.md") -> Path:
    (tmp_project / "docs" / name).write_text(content)
    return tmp_project


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestMainGroup:
    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag(self, tmp_project: Path) -> None:
        project = _project(tmp_project, CLEAN_MD)
        result = CliRunner().invoke(main, ["-v", "lint", "--project", str(project)])
        assert result.exit_code == 0, result.output


class TestLintCommand:
    def test_clean_docs(self, tmp_project: Path) -> None:
        project = _project(tmp_project, CLEAN_MD)
        result = CliRunner().invoke(main, ["lint", "--project", str(project)])
        assert result.exit_code == 0, result.output
        assert result.output == ""

    def test_errors_exit_1(self, tmp_project: Path) -> None:
        project = _project(tmp_project, BROKEN_MD)
        result = CliRunner().invoke(main, ["lint", "--project", str(project)])
        assert result.exit_code == 1
        lines = result.output.strip().splitlines()
        assert lines[0].startswith('Heading arguments for "Foo.bar(a)"')
        assert "mistyped 'return'" in lines[1]

    def test_explicit_docs_dir(self, tmp_path: Path) -> None:
        docs = tmp_path / "api-docs"
        docs.mkdir()
        (docs / "api.md").write_text(BROKEN_MD)
        result = CliRunner().invoke(main, ["lint", str(docs)])
        assert result.exit_code == 1

    def test_missing_docs_dir_exit_2(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(main, ["lint", "--project", str(tmp_path)])
        assert result.exit_code == 2
        assert "Documentation directory not found" in result.output

    def test_docs_dir_from_config(self, tmp_path: Path) -> None:
        api = tmp_path / "site" / "api"
        api.mkdir(parents=True)
        (api / "api.md").write_text(BROKEN_MD)
        (tmp_path / "doclint.yml").write_text("doclint:\n  docs_dir: site/api\n")
        result = CliRunner().invoke(main, ["lint", "--project", str(tmp_path)])
        assert result.exit_code == 1

    def test_stale_toc(self, tmp_project: Path) -> None:
        project = _project(tmp_project, STALE_TOC_MD)
        result = CliRunner().invoke(main, ["lint", "--project", str(project)])
        assert result.exit_code == 1
        assert STALE_TOC_ERROR in result.output

    def test_no_toc_flag(self, tmp_project: Path) -> None:
        project = _project(tmp_project, STALE_TOC_MD)
        result = CliRunner().invoke(main, ["lint", "--no-toc", "--project", str(project)])
        assert result.exit_code == 0, result.output

    def test_format_json(self, tmp_project: Path) -> None:
        project = _project(tmp_project, CLEAN_MD)
        result = CliRunner().invoke(
            main, ["lint", "--project", str(project), "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        parsed = json.loads(result.output)
        assert parsed["errors"] == []
        assert parsed["summary"]["files_scanned"] == 1
        members = parsed["documentation"]["classes"][0]["members"]
        assert [m["name"] for m in members] == ["constructor", "bar", "close"]

    def test_format_rich(self, tmp_project: Path) -> None:
        project = _project(tmp_project, BROKEN_MD)
        result = CliRunner().invoke(
            main, ["lint", "--project", str(project), "--format", "rich"]
        )
        assert result.exit_code == 1
        assert "Files: 1 scanned" in result.output
        assert "2 errors found" in result.output


class TestOutlineCommand:
    def test_json(self, tmp_project: Path) -> None:
        project = _project(tmp_project, CLEAN_MD)
        result = CliRunner().invoke(main, ["outline", "--json", "--project", str(project)])
        assert result.exit_code == 0, result.output
        parsed = json.loads(result.output)
        bar = parsed["classes"][0]["members"][1]
        assert bar == {"kind": "method", "name": "bar", "args": ["a", "b"], "has_return": True}

    def test_tree(self, tmp_project: Path) -> None:
        project = _project(tmp_project, CLEAN_MD)
        result = CliRunner().invoke(main, ["outline", "--project", str(project)])
        assert result.exit_code == 0, result.output
        assert "class Foo" in result.output

    def test_reports_error_count(self, tmp_project: Path) -> None:
        project = _project(tmp_project, BROKEN_MD)
        result = CliRunner().invoke(main, ["outline", "--json", "--project", str(project)])
        assert result.exit_code == 0
        assert "2 lint errors" in result.output


class TestTocCommand:
    def test_reports_stale(self, tmp_path: Path) -> None:
        path = tmp_path / "api.md"
        path.write_text(STALE_TOC_MD)
        result = CliRunner().invoke(main, ["toc", str(path)])
        assert result.exit_code == 1
        assert "stale" in result.output
        assert path.read_text() == STALE_TOC_MD

    def test_write_then_fresh(self, tmp_path: Path) -> None:
        path = tmp_path / "api.md"
        path.write_text(STALE_TOC_MD)
        runner = CliRunner()
        result = runner.invoke(main, ["toc", "--write", str(path)])
        assert result.exit_code == 0, result.output
        assert "- [class: Foo](#class-foo)" in path.read_text()

        result = runner.invoke(main, ["toc", str(path)])
        assert result.exit_code == 0, result.output
        assert result.output == ""

    def test_crlf_file_checked_and_written_as_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "api.md"
        crlf = STALE_TOC_MD + "\n### Foo.bar\n"
        path.write_bytes(crlf.replace("\n", "\r\n").encode("utf-8"))
        runner = CliRunner()

        result = runner.invoke(main, ["toc", str(path)])
        assert result.exit_code == 1
        assert "stale" in result.output

        result = runner.invoke(main, ["toc", "--write", str(path)])
        assert result.exit_code == 0, result.output
        assert b"## class: Foo\r\n\r\n### Foo.bar" in path.read_bytes()

        result = runner.invoke(main, ["toc", str(path)])
        assert result.exit_code == 0, result.output

    def test_invalid_markers(self, tmp_path: Path) -> None:
        path = tmp_path / "api.md"
        path.write_text("<!-- toc -->\n<!-- toc -->\n")
        result = CliRunner().invoke(main, ["toc", str(path)])
        assert result.exit_code == 2
