"""Core package for the snippet separator."""

__all__ = [
    "config",
    "models",
    "markers",
    "collector",
    "transforms",
    "emitter",
    "discovery",
    "runner",
    "cli",
]
