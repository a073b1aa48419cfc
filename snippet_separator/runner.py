"""Batch run loop: discover, collect, transform and emit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .collector import collect_snippets
from .config import AppConfig
from .discovery import list_snippet_files
from .emitter import file_slug, render_snippet, snippet_output_path, source_label, write_snippet
from .logging import get_logger
from .models import SourceFile
from .transforms import process_snippet

logger = get_logger(__name__)


@dataclass(slots=True)
class RunSummary:
    files_scanned: int = 0
    files_with_snippets: int = 0
    snippets: List[Path] = field(default_factory=list)

    @property
    def snippets_written(self) -> int:
        return len(self.snippets)


def process_file(path: Path, config: AppConfig, *, dry_run: bool = False) -> List[Path]:
    """Extract every snippet of one file.

    Raises the file's :class:`~snippet_separator.collector.SnippetError` on the
    first malformed tag. Returns the snippet paths written, or the paths that
    would be written when ``dry_run`` is set. Returns an empty list for files
    without the enablement marker.
    """
    source = SourceFile.read(path)
    result = collect_snippets(
        source,
        default_suffix=config.default_suffix,
        allow_unterminated=config.allow_unterminated,
    )
    regions = result.unwrap()
    if not result.config.enabled:
        return []

    label = source_label(source.path, config.root)
    logger.info(
        "processing_file",
        source=label,
        output=str(config.output_root / file_slug(source.path, config.root)),
        suffix=result.config.suffix,
        snippets=len(regions),
        dry_run=dry_run,
    )

    outputs: List[Path] = []
    for name, region in regions.items():
        body = process_snippet(region.lines, result.config.suffix, config.comment_prefix)
        content = render_snippet(body, label, config.regen_command, config.comment_prefix)
        target = snippet_output_path(config.output_root, source.path, name, config.root)
        if not dry_run:
            write_snippet(target, content)
        outputs.append(target)
    return outputs


def run(config: AppConfig, *, dry_run: bool = False) -> RunSummary:
    """Process every discovered file in order, stopping at the first tag error."""
    summary = RunSummary()
    files = list_snippet_files(
        config.root,
        extensions=config.extensions,
        exclude=config.exclude,
        output_dir=config.output_root,
    )
    for path in files:
        summary.files_scanned += 1
        outputs = process_file(path, config, dry_run=dry_run)
        if outputs:
            summary.files_with_snippets += 1
        summary.snippets.extend(outputs)

    logger.info(
        "run_complete",
        files_scanned=summary.files_scanned,
        files_with_snippets=summary.files_with_snippets,
        snippets=summary.snippets_written,
        dry_run=dry_run,
    )
    return summary
