"""doclint CLI entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from doclint import __version__

if TYPE_CHECKING:
    from doclint.config import DoclintConfig


@click.group()
@click.version_option(version=__version__, prog_name="doclint")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """doclint - API outline extraction and consistency lint for markdown docs."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _resolve_docs_dir(docs_dir: Path | None, project: Path | None) -> tuple[Path, DoclintConfig]:
    """Return the docs directory and the project config it was resolved with."""
    from doclint.config import load_config

    project_root = project or Path.cwd()
    config = load_config(project_root)
    if docs_dir is None:
        docs_dir = config.resolve_docs_dir(project_root)
    return docs_dir, config


_DOCS_DIR_ARG = click.argument(
    "docs_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
_PROJECT_OPT = click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root holding doclint.yml (default: current directory).",
)


@main.command()
@_DOCS_DIR_ARG
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["rich", "json", "porcelain"]),
    default=None,
    help="Output format (default: rich if TTY, porcelain if piped).",
)
@click.option(
    "--no-toc",
    is_flag=True,
    default=False,
    help="Skip the table-of-contents freshness check.",
)
@_PROJECT_OPT
def lint(
    *,
    docs_dir: Path | None,
    fmt: str | None,
    no_toc: bool,
    project: Path | None,
) -> None:
    """Lint the API outline of every markdown file in DOCS_DIR.

    Exit codes: 0 = clean, 1 = lint errors found, 2 = configuration error.
    """
    from dataclasses import replace

    from doclint.corpus import (
        DoclintError,
        format_json,
        format_porcelain,
        format_rich,
        lint_directory,
    )

    docs_dir, config = _resolve_docs_dir(docs_dir, project)
    if no_toc:
        config = replace(config, check_toc=False)

    if fmt is None:
        fmt = "rich" if sys.stdout.isatty() else "porcelain"

    try:
        result = lint_directory(docs_dir, config=config)
    except DoclintError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    formatters = {
        "rich": format_rich,
        "json": format_json,
        "porcelain": format_porcelain,
    }
    output = formatters[fmt](result)
    if output:
        click.echo(output)

    if not result.is_clean:
        sys.exit(1)


@main.command()
@_DOCS_DIR_ARG
@click.option("--json", "as_json", is_flag=True, help="JSON output.")
@_PROJECT_OPT
def outline(*, docs_dir: Path | None, as_json: bool, project: Path | None) -> None:
    """Show the documentation model extracted from DOCS_DIR.

    Lint errors are reported on stderr; the outline is printed either way.
    """
    from doclint.corpus import DoclintError, lint_directory, render_outline

    docs_dir, config = _resolve_docs_dir(docs_dir, project)
    try:
        result = lint_directory(docs_dir, config=config)
    except DoclintError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if as_json:
        click.echo(json.dumps(result.documentation.to_dict(), ensure_ascii=False, indent=2))
    else:
        from rich.console import Console

        render_outline(result.documentation, Console())

    if result.errors:
        click.echo(f"{len(result.errors)} lint errors (run `doclint lint` for details)", err=True)


@main.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--write", is_flag=True, default=False, help="Rewrite stale TOCs in place.")
@click.option(
    "--max-depth",
    type=click.IntRange(1, 6),
    default=None,
    help="Deepest heading level listed (default: from doclint.yml or 6).",
)
@_PROJECT_OPT
def toc(*, files: tuple[Path, ...], write: bool, max_depth: int | None, project: Path | None) -> None:
    """Check or regenerate the table of contents of markdown FILES.

    Without --write, exits 1 when any file has an outdated TOC.
    """
    from doclint.config import load_config
    from doclint.toc import TocError, insert_toc

    if max_depth is None:
        max_depth = load_config(project or Path.cwd()).toc_max_depth

    stale: list[Path] = []
    for path in files:
        text = path.read_bytes().decode("utf-8")
        try:
            new_text = insert_toc(text, max_depth=max_depth)
        except TocError as exc:
            click.echo(f"Error: {path}: {exc}", err=True)
            sys.exit(2)
        if new_text == text:
            continue
        if write:
            path.write_text(new_text, encoding="utf-8", newline="")
            click.echo(f"  updated {path}")
        else:
            stale.append(path)
            click.echo(f"  stale {path}")

    if stale:
        click.echo(f"{len(stale)} files have an outdated TOC. Run with --write to update.")
        sys.exit(1)
