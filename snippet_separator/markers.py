"""Recognition of snippet markers embedded in source comments."""

from __future__ import annotations

import re
from typing import Optional

from .models import MarkerTag

__all__ = [
    "START_PATTERN",
    "END_PATTERN",
    "classify_line",
    "is_enablement_marker",
    "match_suffix_marker",
]

# Must appear somewhere in a file for it to be processed at all.
SEPARATION_PATTERN = re.compile(r"\[SNIPPETS_SEPARATION\s+enabled\]")
SUFFIX_PATTERN = re.compile(r"\[SNIPPETS_SUFFIX\s+([A-Za-z0-9_]+)\]")

START_PATTERN = re.compile(r"\[START\s+([A-Za-z_]+)\s*\]")
END_PATTERN = re.compile(r"\[END\s+([A-Za-z_]+)\s*\]")


def classify_line(line: str) -> MarkerTag:
    """Classify a line as a START tag, an END tag or plain content.

    Lines that only resemble a tag (digits or dashes in the name, missing
    brackets, lowercase keyword) are plain content.
    """
    match = START_PATTERN.search(line)
    if match:
        return MarkerTag.start(match.group(1))
    match = END_PATTERN.search(line)
    if match:
        return MarkerTag.end(match.group(1))
    return MarkerTag.plain()


def is_enablement_marker(line: str) -> bool:
    return SEPARATION_PATTERN.search(line) is not None


def match_suffix_marker(line: str) -> Optional[str]:
    match = SUFFIX_PATTERN.search(line)
    if not match:
        return None
    return match.group(1)
