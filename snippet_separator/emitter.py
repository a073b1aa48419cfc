"""Rendering and writing of standalone snippet files."""

from __future__ import annotations

import re
from pathlib import Path, PurePath
from typing import List, Optional, Sequence

from .config import DEFAULT_COMMENT_PREFIX, DEFAULT_REGEN_COMMAND
from .logging import get_logger

logger = get_logger(__name__)

_SLUG_SEPARATORS = re.compile(r"[\\/.]+")


def build_header(
    source_label: str,
    regen_command: str = DEFAULT_REGEN_COMMAND,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> List[str]:
    """Return the attribution preamble, including its trailing blank line."""
    return [
        f"{comment_prefix} This snippet file was generated by processing the source file:",
        f"{comment_prefix} {source_label}",
        comment_prefix,
        f"{comment_prefix} To update the snippets in this file, edit the source and then run",
        f"{comment_prefix} '{regen_command}'.",
        "",
    ]


def render_snippet(
    body: Sequence[str],
    source_label: str,
    regen_command: str = DEFAULT_REGEN_COMMAND,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> str:
    header = build_header(source_label, regen_command, comment_prefix)
    return "\n".join([*header, *body])


def source_label(source_path: Path, root: Optional[Path] = None) -> str:
    """Path shown in the header: relative to ``root`` when possible, POSIX separators."""
    path = Path(source_path)
    if root is not None:
        try:
            path = path.resolve().relative_to(Path(root).resolve())
        except ValueError:
            pass
    return PurePath(path).as_posix()


def file_slug(source_path: Path, root: Optional[Path] = None) -> str:
    """Flatten a source path into a directory name.

    ``auth/email.link.js`` becomes ``auth-email-link``.
    """
    stem = PurePath(source_label(source_path, root)).with_suffix("").as_posix()
    return _SLUG_SEPARATORS.sub("-", stem).strip("-")


def snippet_output_path(
    output_root: Path,
    source_path: Path,
    region_name: str,
    root: Optional[Path] = None,
) -> Path:
    """Target file for a region; ``region_name`` is the unsuffixed name."""
    extension = Path(source_path).suffix
    return Path(output_root) / file_slug(source_path, root) / f"{region_name}{extension}"


def write_snippet(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, replacing any existing file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("snippet_written", path=str(path), bytes=len(content.encode("utf-8")))
    return path
