"""Line rewrites that turn a captured region into a standalone snippet."""

from __future__ import annotations

import re
from typing import List, Sequence

from .config import DEFAULT_COMMENT_PREFIX
from .markers import END_PATTERN, START_PATTERN

__all__ = [
    "replace_require_with_import",
    "add_suffix_to_snippet_names",
    "adjust_indentation",
    "remove_first_line_after_comments",
    "process_snippet",
]

# Single-line destructured requires only.
REQUIRE_PATTERN = re.compile(r"const \{(.+?)\} = require\((.+?)\)")


def _is_blank(line: str) -> bool:
    return not line.strip()


def replace_require_with_import(lines: Sequence[str]) -> List[str]:
    """Rewrite ``const { foo } = require('bar')`` as ``import { foo } from 'bar'``."""
    return [REQUIRE_PATTERN.sub(r"import {\1} from \2", line, count=1) for line in lines]


def add_suffix_to_snippet_names(lines: Sequence[str], suffix: str) -> List[str]:
    """Change ``[START foo]``/``[END foo]`` into ``[START foo<suffix>]``/``[END foo<suffix>]``."""
    output: List[str] = []
    for line in lines:
        if START_PATTERN.search(line):
            line = START_PATTERN.sub(lambda m: f"[START {m.group(1)}{suffix}]", line, count=1)
        elif END_PATTERN.search(line):
            line = END_PATTERN.sub(lambda m: f"[END {m.group(1)}{suffix}]", line, count=1)
        output.append(line)
    return output


def adjust_indentation(lines: Sequence[str]) -> List[str]:
    """Remove the common left padding so the least indented line is left-aligned.

    Blank lines come back as empty strings. A region without any non-blank
    line is returned as all empty strings.
    """
    indents = [len(line) - len(line.lstrip()) for line in lines if not _is_blank(line)]
    min_indent = min(indents, default=0)
    return ["" if _is_blank(line) else line[min_indent:] for line in lines]


def remove_first_line_after_comments(
    lines: Sequence[str],
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> List[str]:
    """Drop the first line after the leading comment block if it is blank."""
    output = list(lines)
    for index, line in enumerate(output):
        if line.startswith(comment_prefix):
            continue
        if _is_blank(line):
            del output[index]
        break
    return output


def process_snippet(
    lines: Sequence[str],
    suffix: str,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> List[str]:
    """Run every rewrite over a region's lines, in order."""
    output = replace_require_with_import(lines)
    output = add_suffix_to_snippet_names(output, suffix)
    output = adjust_indentation(output)
    output = remove_first_line_after_comments(output, comment_prefix)
    return output
