"""Single-pass collection of snippet regions from one source file.

The collector never raises for malformed tags. Every failure is carried back
in a :class:`CollectResult` and the caller decides whether to halt the batch.

Usage:
    result = collect_snippets(SourceFile.read(path))
    regions = result.unwrap()  # raises the carried SnippetError, if any
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .config import DEFAULT_SUFFIX
from .logging import get_logger
from .markers import classify_line, is_enablement_marker, match_suffix_marker
from .models import FileConfig, MarkerKind, Region, SourceFile

logger = get_logger(__name__)

__all__ = [
    "SnippetError",
    "DuplicateSnippetName",
    "UnmatchedEndTag",
    "UnterminatedSnippet",
    "CollectResult",
    "derive_file_config",
    "collect_regions",
    "collect_snippets",
]


class SnippetError(Exception):
    """Base class for fatal snippet tag errors."""

    def __init__(self, message: str, name: str, source_path: Path) -> None:
        super().__init__(message)
        self.name = name
        self.source_path = source_path


class DuplicateSnippetName(SnippetError):
    """A second START tag reuses a name already captured in the file."""

    def __init__(self, name: str, source_path: Path) -> None:
        super().__init__(
            f"Detected more than one snippet with the tag {name} in {source_path}",
            name,
            source_path,
        )


class UnmatchedEndTag(SnippetError):
    """An END tag names a snippet that is not currently open."""

    def __init__(self, name: str, source_path: Path) -> None:
        super().__init__(f"Unrecognized END tag {name} in {source_path}", name, source_path)


class UnterminatedSnippet(SnippetError):
    """One or more snippets are still open at the end of the file."""

    def __init__(self, names: Sequence[str], source_path: Path) -> None:
        self.names = list(names)
        super().__init__(
            f"Snippet(s) {', '.join(self.names)} in {source_path} have no END tag",
            self.names[0],
            source_path,
        )


@dataclass(slots=True)
class CollectResult:
    config: FileConfig
    regions: Dict[str, Region] = field(default_factory=dict)
    error: Optional[SnippetError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Dict[str, Region]:
        """Return the regions, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.regions


@dataclass(slots=True)
class _ScanState:
    """Accumulator threaded through the scan of a single file."""

    source_path: Path
    regions: Dict[str, Region] = field(default_factory=dict)
    open_names: List[str] = field(default_factory=list)

    def step(self, line: str) -> Optional[SnippetError]:
        tag = classify_line(line)

        if tag.kind is MarkerKind.START:
            if tag.name in self.regions:
                return DuplicateSnippetName(tag.name, self.source_path)
            self._append_to_open(line)
            self.regions[tag.name] = Region(name=tag.name, source_path=self.source_path, lines=[line])
            self.open_names.append(tag.name)
        elif tag.kind is MarkerKind.END:
            if tag.name not in self.open_names:
                return UnmatchedEndTag(tag.name, self.source_path)
            self.regions[tag.name].append(line)
            self.open_names.remove(tag.name)
            self._append_to_open(line)
        else:
            self._append_to_open(line)
        return None

    def _append_to_open(self, line: str) -> None:
        # A line inside nested snippets belongs to all of them, tags included.
        for name in self.open_names:
            self.regions[name].append(line)


def derive_file_config(lines: Iterable[str], default_suffix: str = DEFAULT_SUFFIX) -> FileConfig:
    """Read the enablement marker and the first suffix marker of a file."""
    lines = list(lines)
    enabled = any(is_enablement_marker(line) for line in lines)
    suffix = default_suffix
    for line in lines:
        declared = match_suffix_marker(line)
        if declared is not None:
            suffix = declared
            break
    return FileConfig(enabled=enabled, suffix=suffix)


def collect_regions(
    lines: Iterable[str],
    source_path: Path,
    config: Optional[FileConfig] = None,
    *,
    allow_unterminated: bool = False,
) -> CollectResult:
    """Scan ``lines`` once and group them into named regions."""
    config = config or FileConfig(enabled=True)
    state = _ScanState(source_path=Path(source_path))

    for line in lines:
        error = state.step(line)
        if error is not None:
            return CollectResult(config=config, regions=state.regions, error=error)

    if state.open_names:
        if not allow_unterminated:
            return CollectResult(
                config=config,
                regions=state.regions,
                error=UnterminatedSnippet(state.open_names, state.source_path),
            )
        logger.warning(
            "unterminated_snippet",
            source=str(state.source_path),
            snippets=list(state.open_names),
        )

    return CollectResult(config=config, regions=state.regions)


def collect_snippets(
    source: SourceFile,
    *,
    default_suffix: str = DEFAULT_SUFFIX,
    allow_unterminated: bool = False,
) -> CollectResult:
    """Derive the file's config and, when enabled, collect its regions."""
    config = derive_file_config(source.lines, default_suffix)
    if not config.enabled:
        return CollectResult(config=config)
    return collect_regions(
        source.lines,
        source.path,
        config,
        allow_unterminated=allow_unterminated,
    )
