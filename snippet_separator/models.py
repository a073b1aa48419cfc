"""Domain models for source files, marker tags and snippet regions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_SUFFIX


class MarkerKind(str, Enum):
    START = "start"
    END = "end"
    PLAIN = "plain"


@dataclass(slots=True, frozen=True)
class MarkerTag:
    """Classification of a single source line."""

    kind: MarkerKind
    name: Optional[str] = None

    @classmethod
    def start(cls, name: str) -> "MarkerTag":
        return cls(MarkerKind.START, name)

    @classmethod
    def end(cls, name: str) -> "MarkerTag":
        return cls(MarkerKind.END, name)

    @classmethod
    def plain(cls) -> "MarkerTag":
        return cls(MarkerKind.PLAIN)

    @property
    def is_marker(self) -> bool:
        return self.kind is not MarkerKind.PLAIN


@dataclass(slots=True)
class SourceFile:
    """A file on disk and its text split into lines."""

    path: Path
    lines: List[str]

    @classmethod
    def read(cls, path: Path) -> "SourceFile":
        text = Path(path).read_text(encoding="utf-8")
        return cls(path=Path(path), lines=text.split("\n"))


@dataclass(slots=True, frozen=True)
class FileConfig:
    """Per-file switches derived from the enablement and suffix markers."""

    enabled: bool = False
    suffix: str = DEFAULT_SUFFIX


@dataclass(slots=True)
class Region:
    """A named snippet, including its own START and END lines."""

    name: str
    source_path: Path
    lines: List[str] = field(default_factory=list)

    def append(self, line: str) -> None:
        self.lines.append(line)
