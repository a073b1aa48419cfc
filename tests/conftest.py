import pytest

from snippet_separator.config import load_config


@pytest.fixture()
def app_config(monkeypatch, tmp_path):
    for key in (
        "SNIPPETS_OUTPUT_DIR",
        "SNIPPETS_EXTENSIONS",
        "SNIPPETS_EXCLUDE",
        "SNIPPETS_DEFAULT_SUFFIX",
        "SNIPPETS_REGEN_COMMAND",
        "SNIPPETS_COMMENT_PREFIX",
        "SNIPPETS_ALLOW_UNTERMINATED",
        "SNIPPETS_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("SNIPPETS_ROOT", str(tmp_path))
    return load_config()


@pytest.fixture()
def write_source(tmp_path):
    def _write(relative, *lines):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write
