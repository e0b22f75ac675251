"""Corpus driver: lint every markdown file of a docs directory, merge results."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from doclint.config import DoclintConfig
from doclint.outline.builder import build_outline
from doclint.outline.extractor import SoupHeadingExtractor, extract_outline
from doclint.outline.models import Class, Documentation, MemberKind
from doclint.toc import DEFAULT_MAX_DEPTH, TocError, is_toc_fresh

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from doclint.outline.extractor import HeadingExtractor
    from doclint.outline.models import Member

logger = logging.getLogger(__name__)

STALE_TOC_ERROR = "Markdown TOC is outdated, run `doclint toc --write`"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DoclintError(Exception):
    """Raised when linting cannot run: missing docs directory, broken TOC markers."""


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileReport:
    """Outline and lint errors of a single markdown file."""

    path: Path
    classes: tuple[Class, ...] = ()
    errors: tuple[str, ...] = ()


@dataclass
class LintResult:
    """Result of a lint run over a docs directory."""

    documentation: Documentation = field(default_factory=Documentation)
    errors: list[str] = field(default_factory=list)
    files_scanned: int = 0
    elapsed_ms: float = 0.0

    @property
    def is_clean(self) -> bool:
        return not self.errors


# ---------------------------------------------------------------------------
# Main entry points
# ---------------------------------------------------------------------------


def discover_markdown_files(docs_dir: Path) -> list[Path]:
    """``*.md`` files directly inside *docs_dir*, sorted by name."""
    if not docs_dir.is_dir():
        msg = f"Documentation directory not found: {docs_dir}"
        raise DoclintError(msg)
    return sorted(
        path for path in docs_dir.iterdir() if path.is_file() and path.name.endswith(".md")
    )


def lint_file(
    path: Path,
    *,
    extractor: HeadingExtractor,
    check_toc: bool = True,
    toc_max_depth: int = DEFAULT_MAX_DEPTH,
) -> FileReport:
    """Check the TOC of one file and build its outline.

    Read errors and extractor failures propagate; content problems end up
    in ``FileReport.errors``.
    """
    text = path.read_bytes().decode("utf-8")
    errors: list[str] = []

    if check_toc:
        try:
            fresh = is_toc_fresh(text, max_depth=toc_max_depth)
        except TocError as exc:
            msg = f"Invalid table of contents in {path}: {exc}"
            raise DoclintError(msg) from exc
        if not fresh:
            errors.append(STALE_TOC_ERROR)

    outline = build_outline(extract_outline(text, extractor))
    errors.extend(outline.errors)
    logger.debug(
        "%s: %d classes, %d errors", path.name, len(outline.classes), len(errors)
    )
    return FileReport(path=path, classes=outline.classes, errors=tuple(errors))


def lint_directory(
    docs_dir: Path,
    *,
    config: DoclintConfig | None = None,
    extractor: HeadingExtractor | None = None,
) -> LintResult:
    """Lint all markdown files in *docs_dir*, one at a time, in name order.

    Classes and errors are merged in file order.

    Raises
    ------
    DoclintError
        When *docs_dir* does not exist or a file has unusable TOC markers.
    """
    start = time.monotonic()
    config = config or DoclintConfig()
    extractor = extractor or SoupHeadingExtractor()

    classes: list[Class] = []
    errors: list[str] = []
    paths = discover_markdown_files(docs_dir)
    for path in paths:
        report = lint_file(
            path,
            extractor=extractor,
            check_toc=config.check_toc,
            toc_max_depth=config.toc_max_depth,
        )
        classes.extend(report.classes)
        errors.extend(report.errors)

    elapsed = (time.monotonic() - start) * 1000
    logger.info("Linted %d files in %.1f ms", len(paths), elapsed)
    return LintResult(
        documentation=Documentation(tuple(classes)),
        errors=errors,
        files_scanned=len(paths),
        elapsed_ms=elapsed,
    )


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_rich(result: LintResult) -> str:
    """Format a LintResult as human-readable text.

    Example output with errors::

        Files: 3 scanned, 12 classes, 148 members

        ✗ Failed to process header as method: Page.goto(url)
        ✗ Markdown TOC is outdated, run `doclint toc --write`

        2 errors found (0.4s)
    """
    classes = result.documentation.classes
    member_count = sum(len(c.members) for c in classes)
    lines: list[str] = [
        f"Files: {result.files_scanned} scanned, {len(classes)} classes, {member_count} members",
        "",
    ]

    elapsed_str = f"{result.elapsed_ms / 1000:.1f}s"
    if result.errors:
        lines.extend(f"✗ {err}" for err in result.errors)
        lines.append("")
        lines.append(f"{len(result.errors)} errors found ({elapsed_str})")
    else:
        lines.append(f"✓ No errors found ({elapsed_str})")

    return "\n".join(lines)


def format_json(result: LintResult) -> str:
    """Format a LintResult as JSON with ``errors``, ``summary`` and ``documentation``."""
    classes = result.documentation.classes
    output: dict[str, object] = {
        "errors": list(result.errors),
        "summary": {
            "files_scanned": result.files_scanned,
            "classes": len(classes),
            "members": sum(len(c.members) for c in classes),
            "errors_count": len(result.errors),
            "elapsed_ms": result.elapsed_ms,
        },
        "documentation": result.documentation.to_dict(),
    }
    return json.dumps(output, indent=2)


def format_porcelain(result: LintResult) -> str:
    """One error per line. Empty string when there are no errors."""
    return "\n".join(result.errors)


# ---------------------------------------------------------------------------
# Outline rendering
# ---------------------------------------------------------------------------


def _member_label(member: Member) -> str:
    from rich.markup import escape

    name = escape(member.name)
    if member.kind is MemberKind.EVENT:
        return f"[magenta]event[/] '{name}'"
    if member.kind is MemberKind.PROPERTY:
        return f"[cyan]{name}[/]"
    args = escape(", ".join(arg.name for arg in member.args))
    label = f"[bold]{name}[/]({args})"
    if member.has_return:
        label += " [dim]→ returns[/]"
    return label


def render_outline(documentation: Documentation, console: Console) -> None:
    """Render the documentation model as a Rich tree, one branch per class."""
    from rich.tree import Tree

    if not documentation.classes:
        console.print("[dim]No classes documented.[/]")
        return

    root = Tree("[bold blue]Documentation[/]")
    for cls in documentation.classes:
        branch = root.add(f"[bold green]class {cls.name}[/]")
        for member in cls.members:
            branch.add(_member_label(member))
    console.print(root)
