from pathlib import Path

import pytest

from snippet_separator.collector import (
    DuplicateSnippetName,
    UnmatchedEndTag,
    UnterminatedSnippet,
    collect_regions,
    collect_snippets,
    derive_file_config,
)
from snippet_separator.models import FileConfig, SourceFile

SOURCE = Path("auth/email.js")


def _source(*lines):
    return SourceFile(path=SOURCE, lines=list(lines))


def test_file_without_enablement_marker_yields_no_regions():
    result = collect_snippets(_source("// [START a]", "x", "// [END a]"))
    assert result.ok
    assert result.config.enabled is False
    assert result.regions == {}


def test_derive_file_config_first_suffix_wins():
    config = derive_file_config(
        [
            "// [SNIPPETS_SEPARATION enabled]",
            "// [SNIPPETS_SUFFIX _first]",
            "// [SNIPPETS_SUFFIX _second]",
        ]
    )
    assert config == FileConfig(enabled=True, suffix="_first")


def test_derive_file_config_uses_default_suffix():
    config = derive_file_config(["// [SNIPPETS_SEPARATION enabled]"], default_suffix="_alt")
    assert config.suffix == "_alt"
    assert derive_file_config(["nothing"]).suffix == "_modular"


def test_single_region_includes_tag_lines():
    result = collect_snippets(
        _source(
            "// [SNIPPETS_SEPARATION enabled]",
            "before",
            "// [START x]",
            "body",
            "// [END x]",
            "after",
        )
    )
    regions = result.unwrap()
    assert list(regions) == ["x"]
    assert regions["x"].lines == ["// [START x]", "body", "// [END x]"]
    assert regions["x"].source_path == SOURCE


def test_nested_regions_share_inner_lines():
    lines = ["// [START a]", "L1", "// [START b]", "L2", "// [END b]", "L3", "// [END a]"]
    regions = collect_regions(lines, SOURCE).unwrap()

    assert regions["a"].lines == lines
    assert regions["b"].lines == ["// [START b]", "L2", "// [END b]"]


def test_overlapping_regions_are_independent():
    lines = ["// [START a]", "L1", "// [START b]", "L2", "// [END a]", "L3", "// [END b]"]
    regions = collect_regions(lines, SOURCE).unwrap()

    assert regions["a"].lines == ["// [START a]", "L1", "// [START b]", "L2", "// [END a]"]
    assert regions["b"].lines == ["// [START b]", "L2", "// [END a]", "L3", "// [END b]"]


def test_duplicate_start_is_reported():
    lines = ["// [START a]", "// [END a]", "// [START a]", "// [END a]"]
    result = collect_regions(lines, SOURCE)

    assert not result.ok
    assert isinstance(result.error, DuplicateSnippetName)
    assert result.error.name == "a"
    with pytest.raises(DuplicateSnippetName, match="tag a in auth/email.js"):
        result.unwrap()


def test_unmatched_end_is_reported():
    result = collect_regions(["// [START a]", "// [END b]"], SOURCE)

    assert isinstance(result.error, UnmatchedEndTag)
    assert "Unrecognized END tag b" in str(result.error)


def test_end_after_close_is_unmatched():
    result = collect_regions(["// [START a]", "// [END a]", "// [END a]"], SOURCE)
    assert isinstance(result.error, UnmatchedEndTag)


def test_scan_stops_at_first_failure():
    lines = ["// [END a]", "// [START b]", "x", "// [END b]"]
    result = collect_regions(lines, SOURCE)

    assert isinstance(result.error, UnmatchedEndTag)
    assert result.regions == {}


def test_unterminated_region_fails_by_default():
    result = collect_regions(["// [START a]", "x", "// [START b]"], SOURCE)

    assert isinstance(result.error, UnterminatedSnippet)
    assert result.error.names == ["a", "b"]


def test_unterminated_region_kept_when_allowed():
    result = collect_regions(["// [START a]", "x"], SOURCE, allow_unterminated=True)

    assert result.ok
    assert result.regions["a"].lines == ["// [START a]", "x"]
