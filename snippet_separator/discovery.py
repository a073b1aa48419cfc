"""Discovery of candidate source files under a scan root."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional


def _is_within(path: Path, parent: Path) -> bool:
    try:
        path.relative_to(parent)
    except ValueError:
        return False
    return True


def list_snippet_files(
    root: Path,
    extensions: Iterable[str] = (".js",),
    exclude: Iterable[str] = ("node_modules",),
    output_dir: Optional[Path] = None,
) -> List[Path]:
    """Return every file below ``root`` that may contain snippets, sorted.

    Files under an excluded directory name or under ``output_dir`` are skipped
    so generated snippets are never scanned again.
    """
    root = Path(root)
    suffixes = {ext.lower() for ext in extensions}
    excluded = set(exclude)
    resolved_output = Path(output_dir).resolve() if output_dir is not None else None

    files: List[Path] = []
    for path in root.rglob("*"):
        if not path.is_file() or path.suffix.lower() not in suffixes:
            continue
        relative_parts = path.relative_to(root).parts[:-1]
        if excluded.intersection(relative_parts):
            continue
        if resolved_output is not None and _is_within(path.resolve(), resolved_output):
            continue
        files.append(path)
    return sorted(files)
