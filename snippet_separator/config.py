"""Configuration loader for the snippet separator."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple

from .logging import LOG_FORMATS

DEFAULT_SUFFIX = "_modular"
DEFAULT_REGEN_COMMAND = "npm run snippets"
DEFAULT_COMMENT_PREFIX = "//"


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


def _get_list(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = _get_env(key)
    if value is None:
        return default
    items = tuple(item.strip() for item in value.split(",") if item.strip())
    if not items:
        raise ValueError(f"Environment variable {key} must list at least one value")
    return items


def _normalize_extension(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(slots=True, frozen=True)
class AppConfig:
    root: Path
    output_dir: Path
    extensions: Tuple[str, ...]
    exclude: Tuple[str, ...]
    default_suffix: str
    regen_command: str
    comment_prefix: str
    allow_unterminated: bool
    log_level: str
    log_format: str

    @property
    def output_root(self) -> Path:
        """Output directory resolved against the scan root."""
        if self.output_dir.is_absolute():
            return self.output_dir
        return self.root / self.output_dir

    def with_overrides(self, **overrides) -> "AppConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "extensions" in changes:
            changes["extensions"] = tuple(_normalize_extension(ext) for ext in changes["extensions"])
        if "exclude" in changes:
            changes["exclude"] = tuple(changes["exclude"])
        for key in ("root", "output_dir"):
            if key in changes:
                changes[key] = Path(changes[key])
        return replace(self, **changes)


def load_config() -> AppConfig:
    root = Path(_get_env("SNIPPETS_ROOT", "."))
    output_dir = Path(_get_env("SNIPPETS_OUTPUT_DIR", "snippets"))
    extensions = tuple(
        _normalize_extension(ext) for ext in _get_list("SNIPPETS_EXTENSIONS", (".js",))
    )
    exclude = _get_list("SNIPPETS_EXCLUDE", ("node_modules",))
    default_suffix = _get_env("SNIPPETS_DEFAULT_SUFFIX", DEFAULT_SUFFIX)
    regen_command = _get_env("SNIPPETS_REGEN_COMMAND", DEFAULT_REGEN_COMMAND)
    comment_prefix = _get_env("SNIPPETS_COMMENT_PREFIX", DEFAULT_COMMENT_PREFIX)
    allow_unterminated = _get_bool("SNIPPETS_ALLOW_UNTERMINATED", False)
    log_level = _get_env("LOG_LEVEL", "INFO").upper()
    log_format = _get_env("SNIPPETS_LOG_FORMAT", "console").lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Environment variable SNIPPETS_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")

    return AppConfig(
        root=root,
        output_dir=output_dir,
        extensions=extensions,
        exclude=exclude,
        default_suffix=default_suffix,
        regen_command=regen_command,
        comment_prefix=comment_prefix,
        allow_unterminated=allow_unterminated,
        log_level=log_level,
        log_format=log_format,
    )
