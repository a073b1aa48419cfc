from pathlib import Path

from snippet_separator.emitter import (
    build_header,
    file_slug,
    render_snippet,
    snippet_output_path,
    write_snippet,
)


def test_header_has_five_comment_lines_and_blank_separator():
    header = build_header("auth/email.js")
    assert header == [
        "// This snippet file was generated by processing the source file:",
        "// auth/email.js",
        "//",
        "// To update the snippets in this file, edit the source and then run",
        "// 'npm run snippets'.",
        "",
    ]


def test_render_snippet_joins_header_and_body():
    content = render_snippet(["// [START a_modular]", "x", "// [END a_modular]"], "a.js", "make docs")
    lines = content.split("\n")
    assert lines[4] == "// 'make docs'."
    assert lines[5] == ""
    assert lines[6:] == ["// [START a_modular]", "x", "// [END a_modular]"]
    assert not content.endswith("\n")


def test_file_slug_flattens_separators_and_dots(tmp_path):
    assert file_slug(Path("auth/email.link.js")) == "auth-email-link"
    assert file_slug(tmp_path / "web" / "index.js", tmp_path) == "web-index"


def test_output_path_uses_unsuffixed_name_and_source_extension(tmp_path):
    target = snippet_output_path(tmp_path / "snippets", Path("firestore/queries.ts"), "basic_query")
    assert target == tmp_path / "snippets" / "firestore-queries" / "basic_query.ts"


def test_write_snippet_creates_directories_and_overwrites(tmp_path):
    target = tmp_path / "out" / "nested" / "a.js"
    write_snippet(target, "first")
    write_snippet(target, "second")
    assert target.read_text(encoding="utf-8") == "second"
