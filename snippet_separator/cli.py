"""Command-line interface for the snippet separator."""

from __future__ import annotations

from typing import List, Optional

import typer

from .collector import SnippetError
from .config import AppConfig, load_config
from .logging import configure_logging, get_logger
from .runner import run

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Split tagged snippet regions into standalone files")


def _build_config(
    root: Optional[str],
    output: Optional[str],
    extensions: Optional[List[str]],
    exclude: Optional[List[str]],
    allow_unterminated: Optional[bool],
) -> AppConfig:
    try:
        cfg = load_config()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    cfg = cfg.with_overrides(
        root=root,
        output_dir=output,
        extensions=extensions or None,
        exclude=exclude or None,
        allow_unterminated=allow_unterminated,
    )
    configure_logging(cfg.log_level, cfg.log_format)
    return cfg


@app.command("separate")
def separate_command(
    root: Optional[str] = typer.Option(None, "--root", help="Directory to scan (default: SNIPPETS_ROOT or .)"),
    output: Optional[str] = typer.Option(
        None, "--output", help="Snippet output directory, relative to the root unless absolute"
    ),
    extensions: Optional[List[str]] = typer.Option(None, "--ext", help="File extension to scan (repeatable)"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Directory name to skip (repeatable)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report snippets without writing files"),
    allow_unterminated: Optional[bool] = typer.Option(
        None,
        "--allow-unterminated/--no-allow-unterminated",
        help="Keep snippets that are missing an END tag instead of failing",
    ),
) -> None:
    cfg = _build_config(root, output, extensions, exclude, allow_unterminated)
    try:
        summary = run(cfg, dry_run=dry_run)
    except SnippetError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    verb = "would be written" if dry_run else "written"
    typer.echo(
        f"{summary.snippets_written} snippet(s) {verb} from "
        f"{summary.files_with_snippets} of {summary.files_scanned} file(s) to {cfg.output_root}"
    )


@app.command("check")
def check_command(
    root: Optional[str] = typer.Option(None, "--root", help="Directory to scan (default: SNIPPETS_ROOT or .)"),
    extensions: Optional[List[str]] = typer.Option(None, "--ext", help="File extension to scan (repeatable)"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Directory name to skip (repeatable)"),
) -> None:
    """Validate snippet tags without writing anything."""
    cfg = _build_config(root, None, extensions, exclude, None)
    try:
        summary = run(cfg, dry_run=True)
    except SnippetError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"OK: {summary.snippets_written} snippet(s) in {summary.files_scanned} file(s)")


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
